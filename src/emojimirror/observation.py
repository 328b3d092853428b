"""Observation dataclass for analyzer outputs."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Observation:
    """Per-frame output of the emoji analyzer.

    Attributes:
        source: Name of the analyzer that produced this observation.
        frame_id: Frame identifier from the source video.
        t_ns: Timestamp in nanoseconds (source timeline).
        signals: Flat scalar signals (face_detected, score_smile, ...).
        data: Type-safe output data (EmojiOutput).
        metadata: Additional metadata about the observation.
    """

    source: str
    frame_id: int
    t_ns: int
    signals: Dict[str, Any] = field(default_factory=dict)
    data: Optional[Any] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
