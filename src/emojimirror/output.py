"""Output type for the emoji expression analyzer."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from emojimirror.types import BlendshapeVector, ExpressionCategory


@dataclass
class EmojiOutput:
    """Output from EmojiExpressionAnalyzer.

    Attributes:
        category: Selected expression category.
        glyph: Emoji for ``category``.
        scores: Raw per-category scores, in rule order.
        blendshapes: Blendshapes of the frame, None if no face was found.
    """

    category: ExpressionCategory = ExpressionCategory.NEUTRAL
    glyph: str = ""
    scores: Dict[ExpressionCategory, float] = field(default_factory=dict)
    blendshapes: Optional[BlendshapeVector] = None


__all__ = ["EmojiOutput"]
