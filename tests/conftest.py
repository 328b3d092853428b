"""Shared fixtures for emojimirror tests.

All blendshapes are synthetic — NO ML models needed.
"""

import numpy as np
import pytest

from emojimirror.baseline import BaselineStore

from helpers import SCORED_CHANNELS


@pytest.fixture
def store():
    return BaselineStore()


@pytest.fixture
def zero_vector():
    return {name: 0.0 for name in SCORED_CHANNELS}


@pytest.fixture
def make_vector():
    """Factory fixture for deterministic random blendshape vectors in [0, 1]."""
    def _make(seed: int = 0, scale: float = 1.0):
        rng = np.random.default_rng(seed)
        values = rng.uniform(0.0, scale, len(SCORED_CHANNELS))
        return {name: float(v) for name, v in zip(SCORED_CHANNELS, values)}
    return _make
