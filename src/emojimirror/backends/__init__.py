from emojimirror.backends.base import BlendshapeBackend
from emojimirror.backends.face_landmarker import MediaPipeFaceLandmarkerBackend, result_to_blendshapes

__all__ = [
    "BlendshapeBackend",
    "MediaPipeFaceLandmarkerBackend",
    "result_to_blendshapes",
]
