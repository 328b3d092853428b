"""Shared test helpers for emojimirror tests."""

import json
from pathlib import Path

import numpy as np

# Channels the classifier reads.
SCORED_CHANNELS = [
    "mouthSmileLeft", "mouthSmileRight",
    "jawOpen", "mouthPucker",
    "mouthFrownLeft", "mouthFrownRight",
    "cheekPuffLeft", "cheekPuffRight", "tongueOut",
]


class FakeFrame:
    """Duck-typed stand-in for a video frame."""

    def __init__(self, frame_id=0, t_src_ns=0, w=64, h=48):
        self.frame_id = frame_id
        self.t_src_ns = t_src_ns
        self.data = np.zeros((h, w, 3), dtype=np.uint8)


class MockBlendshapeBackend:
    """Backend returning queued vectors, one per detect() call."""

    def __init__(self, results=None):
        self._results = list(results or [])
        self.calls = []
        self.initialized = False
        self.cleaned_up = False

    def initialize(self) -> None:
        self.initialized = True

    def detect(self, image, timestamp_ms):
        self.calls.append(timestamp_ms)
        if not self._results:
            return None
        return self._results.pop(0)

    def cleanup(self) -> None:
        self.cleaned_up = True


def write_frames(path: Path, frames) -> Path:
    """Write frames as JSONL, one JSON value per line."""
    with open(path, "w", encoding="utf-8") as f:
        for frame in frames:
            f.write(json.dumps(frame) + "\n")
    return path


class CountingVector(dict):
    """Blendshape vector that counts channel lookups."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.lookups = 0

    def get(self, key, default=None):
        self.lookups += 1
        return super().get(key, default)
