"""
Vector helpers on plain 3 (or 4) component arrays.

Only the first three components take part in dot, cross, add, subtract
and magnitude, so a homogeneous point (x, y, z, 1) can be passed where a
Vector3 is expected.
"""
import math
import numpy as np

from .config import DTYPE
from .errors import DegenerateVectorError


def _vec3(v):
    return np.asarray(v, dtype=DTYPE)[:3]


def dot(u, v):
    u = _vec3(u); v = _vec3(v)
    return float(u[0]*v[0] + u[1]*v[1] + u[2]*v[2])


def cross(u, v):
    """Cross product, right hand rule applies."""
    u = _vec3(u); v = _vec3(v)
    return np.array([
        u[1]*v[2] - u[2]*v[1],
        u[2]*v[0] - u[0]*v[2],
        u[0]*v[1] - u[1]*v[0]], dtype=DTYPE)


def add(u, v):
    return _vec3(u) + _vec3(v)


def subtract(u, v):
    """u - v. The difference of two points is a displacement vector."""
    return _vec3(u) - _vec3(v)


def magnitude(v):
    v = _vec3(v)
    return math.sqrt(float(v[0]*v[0] + v[1]*v[1] + v[2]*v[2]))


def normalize(v):
    """Unit vector along v, returned homogeneous as (x, y, z, 1).

    Raises DegenerateVectorError for a zero-length v.
    """
    n = magnitude(v)
    if n == 0.0:
        raise DegenerateVectorError(f"Cannot normalize zero-length vector {np.asarray(v).tolist()}")
    x, y, z = _vec3(v) / n
    return np.array([x, y, z, 1.0], dtype=DTYPE)


def mult(v, m):
    """Multiplies every component of v (any length) by m."""
    return np.asarray(v, dtype=DTYPE) * DTYPE(m)


def project(u, v):
    """Projection of v onto u.

    u must already be normalized; this is not checked.
    """
    return mult(_vec3(u), dot(u, v))
