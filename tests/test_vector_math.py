"""Vector helper tests."""
from __future__ import annotations

import numpy as np
import pytest

from rastermath import (DegenerateVectorError, add, cross, dot, magnitude, mult, normalize,
                        project, subtract)


def test_dot_of_orthogonal_axes_is_zero() -> None:
    assert dot([1, 0, 0], [0, 1, 0]) == 0.0


def test_cross_of_x_and_y_is_z() -> None:
    np.testing.assert_array_equal(cross([1, 0, 0], [0, 1, 0]), [0, 0, 1])


def test_dot_commutes_and_cross_anticommutes(rng) -> None:
    for _ in range(50):
        u, v = rng.uniform(-5.0, 5.0, (2, 3))
        assert dot(u, v) == pytest.approx(dot(v, u), rel=1e-5)
        np.testing.assert_allclose(cross(u, v), mult(cross(v, u), -1), rtol=1e-5, atol=1e-5)


def test_homogeneous_points_use_xyz_only() -> None:
    assert dot([1, 2, 3, 1], [1, 1, 1, 1]) == pytest.approx(6.0)
    np.testing.assert_array_equal(subtract([3, 3, 3, 1], [1, 2, 3, 1]), [2, 1, 0])
    np.testing.assert_array_equal(add([1, 2, 3], [1, 1, 1]), [2, 3, 4])


def test_inputs_are_not_mutated() -> None:
    u = np.array([1.0, 2.0, 3.0], dtype=np.float32)
    add(u, u)
    mult(u, 3.0)
    normalize(u)
    np.testing.assert_array_equal(u, [1.0, 2.0, 3.0])


def test_normalize_is_unit_length_and_homogeneous(rng) -> None:
    for _ in range(50):
        v = rng.uniform(-100.0, 100.0, 3)
        n = normalize(v)
        assert n.shape == (4,)
        assert n[3] == 1.0
        assert magnitude(n[:3]) == pytest.approx(1.0, abs=1e-6)


def test_normalize_zero_vector_raises() -> None:
    with pytest.raises(DegenerateVectorError):
        normalize([0, 0, 0])


def test_magnitude() -> None:
    assert magnitude([3, 4, 0]) == pytest.approx(5.0)


def test_mult_keeps_length() -> None:
    np.testing.assert_array_equal(mult([1, 2, 3, 4], 2), [2, 4, 6, 8])


def test_project_onto_unit_axis() -> None:
    np.testing.assert_allclose(project([0, 1, 0], [3, 4, 5]), [0, 4, 0])
    u = normalize([1, 1, 0])
    np.testing.assert_allclose(project(u, [2, 0, 0]), [1, 1, 0], atol=1e-6)
