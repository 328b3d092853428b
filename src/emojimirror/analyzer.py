"""Emoji expression analyzer - blendshapes per frame to an emoji."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from emojimirror.backends.base import BlendshapeBackend
from emojimirror.baseline import BaselineStore
from emojimirror.classifier import ExpressionClassifier
from emojimirror.glyphs import glyph_for
from emojimirror.observation import Observation
from emojimirror.output import EmojiOutput
from emojimirror.types import BlendshapeVector

logger = logging.getLogger(__name__)


def _timestamp_ms(frame: Any) -> int:
    return int(getattr(frame, "t_src_ns", 0)) // 1_000_000


class EmojiExpressionAnalyzer:
    """Analyzer mapping each frame's face blendshapes to an emoji.

    Frames are duck-typed: ``data`` (BGR ndarray), ``frame_id`` and
    ``t_src_ns``. Classification and calibration share one BaselineStore.

    Args:
        backend: Blendshape backend. Defaults to MediaPipe FaceLandmarker,
            created on ``initialize()``.
        store: Baseline store. A fresh, uncalibrated one when omitted.
        classifier: Expression classifier with default thresholds when omitted.
    """

    def __init__(
        self,
        backend: Optional[BlendshapeBackend] = None,
        store: Optional[BaselineStore] = None,
        classifier: Optional[ExpressionClassifier] = None,
    ):
        self._backend = backend
        self._store = store if store is not None else BaselineStore()
        self._classifier = classifier or ExpressionClassifier()
        self._initialized = False

    @property
    def name(self) -> str:
        return "face.emoji"

    @property
    def store(self) -> BaselineStore:
        return self._store

    @property
    def classifier(self) -> ExpressionClassifier:
        return self._classifier

    def initialize(self) -> None:
        if self._initialized:
            return

        if self._backend is None:
            from emojimirror.backends.face_landmarker import MediaPipeFaceLandmarkerBackend
            self._backend = MediaPipeFaceLandmarkerBackend()
            logger.info("EmojiExpressionAnalyzer using MediaPipeFaceLandmarkerBackend")

        self._backend.initialize()
        self._initialized = True

    def cleanup(self) -> None:
        if self._backend is not None:
            self._backend.cleanup()
        self._initialized = False
        logger.info("EmojiExpressionAnalyzer cleaned up")

    def _detect(self, frame: Any) -> Optional[BlendshapeVector]:
        if not self._initialized:
            raise RuntimeError("Analyzer not initialized. Call initialize() first.")
        return self._backend.detect(frame.data, _timestamp_ms(frame))

    def calibrate(self, frame: Any) -> bool:
        """Use this frame's face as the new baseline.

        Returns:
            True if a face was found and the baseline replaced, False if
            the baseline was left unchanged.
        """
        blendshapes = self._detect(frame)
        self._store.calibrate(blendshapes)
        if blendshapes is None:
            logger.warning("Calibration frame %s has no face; baseline unchanged",
                           getattr(frame, "frame_id", "?"))
            return False
        return True

    def process(self, frame: Any) -> Observation:
        blendshapes = self._detect(frame)
        return self.observe(blendshapes, frame_id=frame.frame_id, t_ns=frame.t_src_ns)

    def observe(
        self,
        blendshapes: Optional[BlendshapeVector],
        frame_id: int = 0,
        t_ns: int = 0,
    ) -> Observation:
        """Classify already-extracted blendshapes into an Observation."""
        baseline = self._store.get_baseline()
        category, scores = self._classifier.evaluate(blendshapes, baseline)

        signals: Dict[str, Any] = {
            "face_detected": blendshapes is not None,
            "calibrated": baseline is not None,
        }
        for cat, value in scores.items():
            signals[f"score_{cat.value}"] = value

        return Observation(
            source=self.name,
            frame_id=frame_id,
            t_ns=t_ns,
            signals=signals,
            data=EmojiOutput(
                category=category,
                glyph=glyph_for(category),
                scores=scores,
                blendshapes=blendshapes,
            ),
        )


__all__ = ["EmojiExpressionAnalyzer"]
