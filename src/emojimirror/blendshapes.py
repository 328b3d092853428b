"""Blendshape vector helpers.

Converts the landmarker's per-face category list into a name -> score
mapping and provides total lookups over it. Missing vectors, channels and
values all read as 0.0.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from emojimirror.types import BlendshapeVector

_NAME_KEYS = ("categoryName", "category_name", "name")


def _category_name(category: Any) -> Optional[str]:
    if isinstance(category, Mapping):
        for key in _NAME_KEYS:
            name = category.get(key)
            if name:
                return str(name)
        return None
    name = getattr(category, "category_name", None) or getattr(category, "name", None)
    return str(name) if name else None


def _category_score(category: Any) -> float:
    if isinstance(category, Mapping):
        score = category.get("score")
    else:
        score = getattr(category, "score", None)
    return float(score) if score is not None else 0.0


def blend_map(categories: Optional[Iterable[Any]]) -> BlendshapeVector:
    """Build a BlendshapeVector from a sequence of {name, score} entries.

    Accepts MediaPipe ``Category`` objects or plain dicts. Duplicate names
    keep the last score; entries without a name are skipped.

    Args:
        categories: Blendshape entries for one face, or None.

    Returns:
        Mapping of channel name to score ({} for None or empty input).
    """
    out: BlendshapeVector = {}
    for category in categories or ():
        name = _category_name(category)
        if name is None:
            continue
        out[name] = _category_score(category)
    return out


def channel(vector: Optional[Mapping[str, float]], name: str) -> float:
    """Score of a channel, 0.0 when the vector or value is absent."""
    if vector is None:
        return 0.0
    value = vector.get(name)
    return float(value) if value is not None else 0.0


def delta(
    current: Optional[Mapping[str, float]],
    baseline: Optional[Mapping[str, float]],
    name: str,
) -> float:
    """Current score minus baseline score for one channel."""
    return channel(current, name) - channel(baseline, name)


__all__ = ["blend_map", "channel", "delta"]
