"""Core types for emojimirror."""

from enum import Enum
from typing import Dict, Mapping, Optional


# Blendshape channel name -> score in [0, 1], one frame.
BlendshapeVector = Dict[str, float]

# Baseline snapshot; None means uncalibrated.
Baseline = Optional[Mapping[str, float]]


class ExpressionCategory(str, Enum):
    """Expression classes the classifier can select."""

    NEUTRAL = "neutral"
    SMILE = "smile"
    SURPRISE = "surprise"
    FROWN = "frown"
    CHEEKY = "cheeky"

    @classmethod
    def from_string(cls, value: str) -> "ExpressionCategory":
        """Parse a category from its string value (case-insensitive).

        Raises:
            ValueError: If the value names no category.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown expression category: {value!r} (expected one of: {valid})")


__all__ = ["BlendshapeVector", "Baseline", "ExpressionCategory"]
