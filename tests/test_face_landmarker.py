"""Tests for the MediaPipe FaceLandmarker backend (no model required)."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from emojimirror.backends.face_landmarker import (
    MediaPipeFaceLandmarkerBackend,
    result_to_blendshapes,
)


def _category(name, score):
    return SimpleNamespace(index=0, score=score, display_name="", category_name=name)


class TestResultConversion:
    def test_first_face_used(self):
        result = SimpleNamespace(face_blendshapes=[
            [_category("jawOpen", 0.4), _category("tongueOut", 0.1)],
            [_category("jawOpen", 0.9)],
        ])
        assert result_to_blendshapes(result) == {"jawOpen": 0.4, "tongueOut": 0.1}

    def test_no_face(self):
        assert result_to_blendshapes(SimpleNamespace(face_blendshapes=[])) is None
        assert result_to_blendshapes(SimpleNamespace(face_blendshapes=None)) is None
        assert result_to_blendshapes(None) is None


class TestBackend:
    def test_detect_before_initialize_raises(self):
        backend = MediaPipeFaceLandmarkerBackend()
        with pytest.raises(RuntimeError, match="not initialized"):
            backend.detect(np.zeros((4, 4, 3), dtype=np.uint8), 0)

    def test_initialize_missing_model(self, tmp_path):
        pytest.importorskip("mediapipe")
        backend = MediaPipeFaceLandmarkerBackend(model_path=str(tmp_path / "missing.task"))
        with pytest.raises(FileNotFoundError):
            backend.initialize()

    def test_cleanup_closes_landmarker(self):
        backend = MediaPipeFaceLandmarkerBackend()
        landmarker = MagicMock()
        backend._landmarker = landmarker
        backend._initialized = True

        backend.cleanup()

        landmarker.close.assert_called_once()
        assert backend._landmarker is None

    def test_detect_bumps_repeated_timestamps(self):
        pytest.importorskip("mediapipe")
        pytest.importorskip("cv2")

        backend = MediaPipeFaceLandmarkerBackend()
        landmarker = MagicMock()
        landmarker.detect_for_video.return_value = SimpleNamespace(
            face_blendshapes=[[_category("jawOpen", 0.5)]]
        )
        backend._landmarker = landmarker
        backend._initialized = True

        image = np.zeros((8, 8, 3), dtype=np.uint8)
        with patch("mediapipe.Image") as mp_image:
            mp_image.return_value = "img"
            assert backend.detect(image, 100) == {"jawOpen": 0.5}
            backend.detect(image, 100)
            backend.detect(image, 50)

        timestamps = [call.args[1] for call in landmarker.detect_for_video.call_args_list]
        assert timestamps == [100, 101, 102]
