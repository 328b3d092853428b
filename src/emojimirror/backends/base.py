"""Backend protocol for blendshape producers."""

from typing import Optional, Protocol

import numpy as np

from emojimirror.types import BlendshapeVector


class BlendshapeBackend(Protocol):
    """Protocol for face blendshape backends.

    Implementations run a face-landmark model on one frame and report the
    blendshape scores of the first face, or None when no face is found.
    Example: MediaPipe FaceLandmarker.
    """

    def initialize(self) -> None:
        """Initialize the backend and load models."""
        ...

    def detect(self, image: np.ndarray, timestamp_ms: int) -> Optional[BlendshapeVector]:
        """Blendshapes of the first detected face in a BGR image."""
        ...

    def cleanup(self) -> None:
        """Release resources and unload models."""
        ...


__all__ = ["BlendshapeBackend"]
