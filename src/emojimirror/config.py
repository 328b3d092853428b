"""Configuration for the expression classifier.

Thresholds and the global floor are empirically chosen and meant to be
tuned per setup. The scoring formulas and the rule order are fixed.

Example:
    >>> from emojimirror.config import ClassifierConfig
    >>> config = ClassifierConfig.from_dict({"thresholds": {"smile": 0.3}})
    >>> config.thresholds["smile"]
    0.3
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from emojimirror.types import ExpressionCategory

DEFAULT_THRESHOLDS: Dict[str, float] = {
    ExpressionCategory.SMILE.value: 0.25,
    ExpressionCategory.SURPRISE.value: 0.28,
    ExpressionCategory.FROWN.value: 0.20,
    ExpressionCategory.CHEEKY.value: 0.22,
}

# No category wins at or below this score, whatever its own threshold.
DEFAULT_MIN_SCORE = 0.15


def _validate_thresholds(thresholds: Dict[str, Any]) -> Dict[str, float]:
    merged = dict(DEFAULT_THRESHOLDS)
    for name, value in thresholds.items():
        if name not in DEFAULT_THRESHOLDS:
            valid = ", ".join(DEFAULT_THRESHOLDS)
            raise ValueError(f"Unknown threshold category: {name!r} (expected one of: {valid})")
        merged[name] = float(value)
    return merged


@dataclass
class ClassifierConfig:
    """Tunable constants of the expression classifier.

    Attributes:
        thresholds: Per-category minimum score, keyed by category value.
            Categories left out keep their defaults.
        min_score: Global floor a winning score must exceed.
    """

    thresholds: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_THRESHOLDS))
    min_score: float = DEFAULT_MIN_SCORE

    def __post_init__(self) -> None:
        self.thresholds = _validate_thresholds(self.thresholds)
        self.min_score = float(self.min_score)

    def threshold(self, category: ExpressionCategory) -> float:
        return self.thresholds[category.value]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClassifierConfig":
        """Create a config from a dictionary (e.g., loaded from YAML).

        Args:
            data: Mapping with optional ``thresholds`` and ``min_score`` keys.

        Raises:
            ValueError: If ``thresholds`` names an unknown category.
        """
        data = data or {}
        return cls(
            thresholds=data.get("thresholds") or {},
            min_score=data.get("min_score", DEFAULT_MIN_SCORE),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ClassifierConfig":
        """Load a config from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file holds an unknown category.
        """
        import yaml

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "thresholds": dict(self.thresholds),
            "min_score": self.min_score,
        }


__all__ = ["ClassifierConfig", "DEFAULT_THRESHOLDS", "DEFAULT_MIN_SCORE"]
