"""MediaPipe FaceLandmarker backend for blendshape scores."""

from pathlib import Path
from typing import Any, Optional
import logging
import urllib.request

import numpy as np

from emojimirror.blendshapes import blend_map
from emojimirror.types import BlendshapeVector

logger = logging.getLogger(__name__)

# Model download URL
FACE_LANDMARKER_MODEL_URL = (
    "https://storage.googleapis.com/mediapipe-models/face_landmarker/"
    "face_landmarker/float16/1/face_landmarker.task"
)


def _get_model_path() -> Path:
    """Get path to face landmarker model, downloading if necessary."""
    cache_dir = Path.home() / ".cache" / "emojimirror" / "models"
    cache_dir.mkdir(parents=True, exist_ok=True)

    model_path = cache_dir / "face_landmarker.task"

    if not model_path.exists():
        logger.info("Downloading face landmarker model to %s...", model_path)
        try:
            urllib.request.urlretrieve(FACE_LANDMARKER_MODEL_URL, model_path)
            logger.info("Download complete.")
        except Exception as e:
            raise RuntimeError(
                f"Failed to download face landmarker model: {e}\n"
                f"You can manually download from: {FACE_LANDMARKER_MODEL_URL}\n"
                f"And save to: {model_path}"
            ) from e

    return model_path


def result_to_blendshapes(result: Any) -> Optional[BlendshapeVector]:
    """Blendshapes of the first face in a FaceLandmarkerResult.

    Returns None when the result holds no face.
    """
    faces = getattr(result, "face_blendshapes", None) if result is not None else None
    if not faces:
        return None
    return blend_map(faces[0])


class MediaPipeFaceLandmarkerBackend:
    """MediaPipe FaceLandmarker backend reporting face blendshapes.

    Uses the MediaPipe Tasks API (0.10.x+) in VIDEO running mode with
    blendshape output enabled and a single face.

    Args:
        model_path: Path to a ``face_landmarker.task`` file. Downloaded to
            the user cache when omitted.
        min_detection_confidence: Minimum face detection confidence.
        min_tracking_confidence: Minimum tracking confidence.
    """

    def __init__(
        self,
        model_path: Optional[str] = None,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
    ):
        self._model_path = model_path
        self._min_detection_confidence = min_detection_confidence
        self._min_tracking_confidence = min_tracking_confidence
        self._landmarker: Optional[object] = None
        self._last_timestamp_ms = -1
        self._initialized = False

    def initialize(self) -> None:
        """Initialize MediaPipe FaceLandmarker."""
        if self._initialized:
            return

        try:
            from mediapipe.tasks import python
            from mediapipe.tasks.python import vision
        except ImportError as e:
            raise ImportError(
                "MediaPipe is required for live blendshape detection. "
                "Install it with: pip install emojimirror[mediapipe]"
            ) from e

        model_path = Path(self._model_path) if self._model_path else _get_model_path()
        if not model_path.exists():
            raise FileNotFoundError(f"Face landmarker model not found: {model_path}")

        base_options = python.BaseOptions(model_asset_path=str(model_path))
        options = vision.FaceLandmarkerOptions(
            base_options=base_options,
            running_mode=vision.RunningMode.VIDEO,
            output_face_blendshapes=True,
            num_faces=1,
            min_face_detection_confidence=self._min_detection_confidence,
            min_tracking_confidence=self._min_tracking_confidence,
        )

        self._landmarker = vision.FaceLandmarker.create_from_options(options)
        self._last_timestamp_ms = -1
        self._initialized = True
        logger.info("MediaPipe FaceLandmarker backend initialized (Tasks API)")

    def detect(self, image: np.ndarray, timestamp_ms: int) -> Optional[BlendshapeVector]:
        """Detect the first face and return its blendshapes.

        Args:
            image: BGR image as numpy array (H, W, 3).
            timestamp_ms: Frame timestamp. VIDEO mode needs strictly
                increasing timestamps; repeats are bumped by 1 ms.

        Returns:
            Blendshape vector, or None if no face was found.
        """
        if not self._initialized or self._landmarker is None:
            raise RuntimeError("Backend not initialized. Call initialize() first.")

        import mediapipe as mp
        import cv2

        # MediaPipe expects RGB
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=image_rgb)

        timestamp_ms = max(int(timestamp_ms), self._last_timestamp_ms + 1)
        self._last_timestamp_ms = timestamp_ms

        result = self._landmarker.detect_for_video(mp_image, timestamp_ms)
        return result_to_blendshapes(result)

    def cleanup(self) -> None:
        """Release MediaPipe resources."""
        if self._landmarker is not None:
            self._landmarker.close()
            self._landmarker = None
        self._initialized = False
        logger.info("MediaPipe FaceLandmarker backend cleaned up")


__all__ = ["MediaPipeFaceLandmarkerBackend", "result_to_blendshapes", "FACE_LANDMARKER_MODEL_URL"]
