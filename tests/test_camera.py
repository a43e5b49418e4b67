"""Legacy look-at projection tests."""
from __future__ import annotations

import numpy as np
import pytest

from rastermath import DegenerateVectorError, look_at_projection, matrix_vec_mult


def test_look_at_warns_deprecated() -> None:
    with pytest.deprecated_call():
        look_at_projection([0, 0, 0], [0, 0, 1])


@pytest.mark.filterwarnings("ignore::DeprecationWarning")
def test_look_at_scales_by_depth_over_distance() -> None:
    M = look_at_projection([0, 0, 0], [0, 0, 1], distance=100.0)
    x, y, z, w = matrix_vec_mult(M, [1, 2, 50, 1])
    assert z == 0.0
    assert w == pytest.approx(0.5)
    assert abs(x) == pytest.approx(1.0)
    assert y == pytest.approx(2.0)


@pytest.mark.filterwarnings("ignore::DeprecationWarning")
def test_look_at_eye_maps_to_view_origin() -> None:
    eye = [3, 4, 5]
    M = look_at_projection(eye, [3, 4, 10])
    x, y, _, w = matrix_vec_mult(M, eye + [1])
    assert (x, y, w) == pytest.approx((0.0, 0.0, 0.0), abs=1e-5)


@pytest.mark.filterwarnings("ignore::DeprecationWarning")
@pytest.mark.parametrize("eye, at", [([1, 1, 1], [1, 1, 1]), ([0, 0, 0], [0, 5, 0])])
def test_look_at_degenerate_basis_raises(eye, at) -> None:
    with pytest.raises(DegenerateVectorError):
        look_at_projection(eye, at)
