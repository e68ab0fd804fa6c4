"""Shared fixtures for luvkit tests."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so sampled colors are stable across runs."""
    return np.random.default_rng(42)


@pytest.fixture
def rgb_samples(rng):
    """Random sRGB colors plus the cube corners and a few grays, shape (N, 3)."""
    corners = np.array([
        [0, 0, 0],
        [1, 0, 0],
        [0, 1, 0],
        [0, 0, 1],
        [1, 1, 0],
        [1, 0, 1],
        [0, 1, 1],
        [1, 1, 1],
    ], dtype=np.float64)
    grays = np.repeat(np.linspace(0.1, 0.9, 5)[:, None], 3, axis=1)
    return np.concatenate([corners, grays, rng.random((200, 3))])


@pytest.fixture
def hsl_grid():
    """Grid of (h, s, l) with s and l covering [0, 100] including the poles."""
    h = np.linspace(0, 360, 24, endpoint=False)
    s = np.linspace(0, 100, 6)
    l = np.linspace(0, 100, 11)
    H, S, L = np.meshgrid(h, s, l, indexing='ij')
    return np.stack([H.ravel(), S.ravel(), L.ravel()], axis=-1)
