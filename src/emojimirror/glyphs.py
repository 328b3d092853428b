"""Category -> emoji glyph lookup used by display layers."""

from typing import Dict, Union

from emojimirror.types import ExpressionCategory

EMOJI_SET: Dict[ExpressionCategory, str] = {
    ExpressionCategory.NEUTRAL: "\U0001F610",   # 😐
    ExpressionCategory.SMILE: "\U0001F642",     # 🙂
    ExpressionCategory.SURPRISE: "\U0001F62E",  # 😮
    ExpressionCategory.FROWN: "\U0001F621",     # 😡
    ExpressionCategory.CHEEKY: "\U0001F61C",    # 😜
}


def glyph_for(category: Union[ExpressionCategory, str]) -> str:
    """Emoji for a category (enum member or its string value)."""
    if not isinstance(category, ExpressionCategory):
        if not isinstance(category, str):
            raise ValueError(f"Expected an ExpressionCategory or str, got {type(category).__name__}")
        category = ExpressionCategory.from_string(category)
    return EMOJI_SET[category]


__all__ = ["EMOJI_SET", "glyph_for"]
