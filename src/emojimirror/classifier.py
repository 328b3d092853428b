"""Expression classifier - blendshape deltas to an emoji category.

Each category has a fixed scoring rule over channel deltas (current minus
baseline). Rules are folded left to right in ``RULE_ORDER``; a category
replaces the running best only when its score is strictly above both its own
threshold and the best score so far, which starts at the global floor.
Equal scores therefore resolve to the earlier rule.

Example:
    >>> from emojimirror import classify
    >>> classify({"mouthSmileLeft": 0.3, "mouthSmileRight": 0.1}, None)
    <ExpressionCategory.SMILE: 'smile'>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from emojimirror.baseline import BaselineStore
from emojimirror.blendshapes import delta
from emojimirror.config import ClassifierConfig
from emojimirror.types import ExpressionCategory

logger = logging.getLogger(__name__)

Vector = Optional[Mapping[str, float]]
ScoreFn = Callable[[Vector, Vector], float]
BaselineSource = Union[BaselineStore, Mapping[str, float], None]


def smile_score(current: Vector, baseline: Vector) -> float:
    return max(
        delta(current, baseline, "mouthSmileLeft"),
        delta(current, baseline, "mouthSmileRight"),
    )


def surprise_score(current: Vector, baseline: Vector) -> float:
    return (
        delta(current, baseline, "jawOpen") * 0.9
        + delta(current, baseline, "mouthPucker") * 0.4
    )


def frown_score(current: Vector, baseline: Vector) -> float:
    return max(
        delta(current, baseline, "mouthFrownLeft"),
        delta(current, baseline, "mouthFrownRight"),
    )


def cheeky_score(current: Vector, baseline: Vector) -> float:
    puff = max(
        delta(current, baseline, "cheekPuffLeft"),
        delta(current, baseline, "cheekPuffRight"),
    )
    return puff + delta(current, baseline, "tongueOut")


# Evaluation order is part of the contract: it decides ties.
RULE_ORDER: Tuple[Tuple[ExpressionCategory, ScoreFn], ...] = (
    (ExpressionCategory.SMILE, smile_score),
    (ExpressionCategory.SURPRISE, surprise_score),
    (ExpressionCategory.FROWN, frown_score),
    (ExpressionCategory.CHEEKY, cheeky_score),
)


@dataclass(frozen=True)
class ScoringRule:
    """One category's scoring function and threshold."""

    category: ExpressionCategory
    score_fn: ScoreFn
    threshold: float


def _resolve_baseline(baseline: BaselineSource) -> Vector:
    if isinstance(baseline, BaselineStore):
        return baseline.get_baseline()
    return baseline


class ExpressionClassifier:
    """Maps (current vector, baseline) to one ExpressionCategory.

    Stateless apart from its constants; the baseline is always passed in.
    An uncalibrated baseline behaves as an all-zero vector, so raw scores
    are used until the first calibration.

    Args:
        config: Thresholds and global floor. Defaults to ClassifierConfig().
    """

    def __init__(self, config: Optional[ClassifierConfig] = None):
        self._config = config or ClassifierConfig()
        self._rules: List[ScoringRule] = [
            ScoringRule(category, score_fn, self._config.threshold(category))
            for category, score_fn in RULE_ORDER
        ]

    @property
    def config(self) -> ClassifierConfig:
        return self._config

    @property
    def rules(self) -> List[ScoringRule]:
        return list(self._rules)

    def score(
        self,
        current: Vector,
        baseline: BaselineSource = None,
    ) -> Dict[ExpressionCategory, float]:
        """Raw per-category scores in rule order (all 0.0 for no face)."""
        base = _resolve_baseline(baseline)
        if current is None:
            return {rule.category: 0.0 for rule in self._rules}
        return {rule.category: rule.score_fn(current, base) for rule in self._rules}

    def classify(
        self,
        current: Vector,
        baseline: BaselineSource = None,
    ) -> ExpressionCategory:
        """Select the expression category for one frame.

        Args:
            current: Blendshapes of the current frame, None if no face.
            baseline: BaselineStore, baseline vector, or None (uncalibrated).

        Returns:
            The winning category; NEUTRAL when nothing qualifies.
        """
        if current is None:
            return ExpressionCategory.NEUTRAL
        return self.select(self.score(current, baseline))

    def evaluate(
        self,
        current: Vector,
        baseline: BaselineSource = None,
    ) -> Tuple[ExpressionCategory, Dict[ExpressionCategory, float]]:
        """Category and per-category scores, scoring each rule once."""
        scores = self.score(current, baseline)
        if current is None:
            return ExpressionCategory.NEUTRAL, scores
        return self.select(scores), scores

    def select(self, scores: Mapping[ExpressionCategory, float]) -> ExpressionCategory:
        """Fold precomputed scores in rule order; missing categories never win."""
        best = ExpressionCategory.NEUTRAL
        best_score = self._config.min_score

        for rule in self._rules:
            value = scores.get(rule.category)
            if value is None:
                continue
            if value > rule.threshold and value > best_score:
                best = rule.category
                best_score = value

        logger.debug("classify: %s (score=%.3f)", best.value, best_score)
        return best


_default_classifier = ExpressionClassifier()


def classify(current: Vector, baseline: BaselineSource = None) -> ExpressionCategory:
    """Classify with the default thresholds."""
    return _default_classifier.classify(current, baseline)


__all__ = [
    "ExpressionClassifier",
    "ScoringRule",
    "RULE_ORDER",
    "classify",
    "smile_score",
    "surprise_score",
    "frown_score",
    "cheeky_score",
]
