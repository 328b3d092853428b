"""Baseline store - the calibrated rest-face snapshot.

The baseline is replaced whole on every calibration and handed out as a
read-only mapping, so a reader always sees one consistent snapshot even if
calibration runs on another thread.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


class BaselineStore:
    """Holds the most recent calibration snapshot, or nothing.

    Two states: uncalibrated (``get_baseline()`` is None) and calibrated
    with a vector. Transitions only through ``calibrate`` and ``reset``.

    Example:
        >>> store = BaselineStore()
        >>> store.calibrate({"mouthSmileLeft": 0.2})
        >>> store.get_baseline()["mouthSmileLeft"]
        0.2
    """

    def __init__(self, baseline: Optional[Mapping[str, float]] = None):
        self._lock = threading.Lock()
        self._baseline: Optional[Mapping[str, float]] = None
        if baseline is not None:
            self._baseline = MappingProxyType(dict(baseline))

    @property
    def is_calibrated(self) -> bool:
        return self.get_baseline() is not None

    def calibrate(self, vector: Optional[Mapping[str, float]]) -> None:
        """Replace the baseline with a copy of ``vector``.

        A None vector (no face in the calibration frame) is ignored and the
        previous baseline is kept.
        """
        if vector is None:
            logger.debug("Calibration skipped: no blendshapes")
            return

        snapshot = MappingProxyType(dict(vector))
        with self._lock:
            self._baseline = snapshot
        logger.info("Calibrated baseline (%d channels)", len(snapshot))

    def get_baseline(self) -> Optional[Mapping[str, float]]:
        """Current baseline snapshot, or None if never calibrated."""
        with self._lock:
            return self._baseline

    def reset(self) -> None:
        """Drop the baseline and return to the uncalibrated state."""
        with self._lock:
            self._baseline = None
        logger.info("Baseline reset")


__all__ = ["BaselineStore"]
