"""Pytest configuration for rastermath tests."""
from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

# Make the src/ layout importable without an install.
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rastermath import rotation, scale, translation, matrix_matrix_mult  # noqa: E402


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(248)


@pytest.fixture
def random_affine(rng):
    """Factory for random affine matrices built from random T, R and S."""

    def make() -> np.ndarray:
        t = translation(*rng.uniform(-10.0, 10.0, 3))
        r = matrix_matrix_mult(
            rotation(rng.uniform(-180.0, 180.0), "x"),
            rotation(rng.uniform(-180.0, 180.0), "y"),
        )
        s = scale(*rng.uniform(0.1, 5.0, 3))
        return matrix_matrix_mult(t, matrix_matrix_mult(r, s))

    return make
