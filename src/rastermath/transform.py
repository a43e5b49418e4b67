"""
Factory functions for 4x4 transform matrices.

Everything except perspective_projection returns an affine matrix
(bottom row [0, 0, 0, 1]).
"""
import enum
import logging
import math
import numbers
import numpy as np

from .config import DTYPE
from .errors import UnsupportedAxisError, ProjectionParameterError

logger = logging.getLogger(__name__)


class Axis(enum.Enum):
    """Axes rotation() supports. There is no Z rotation."""
    X = 0
    Y = 1


_AXIS_VECTORS = {
    Axis.X: (1.0, 0.0, 0.0),
    Axis.Y: (0.0, 1.0, 0.0),
}


def resolve_axis(axis):
    """Turns an Axis, its value (0, 1) or its name ("x", "Y") into an Axis.

    Raises UnsupportedAxisError for anything else.
    """
    if isinstance(axis, Axis):
        return axis
    if isinstance(axis, str):
        try:
            return Axis[axis.upper()]
        except KeyError:
            raise UnsupportedAxisError(axis) from None
    # bool is an int subclass, True must not pass for Axis.Y
    if isinstance(axis, numbers.Integral) and not isinstance(axis, bool):
        try:
            return Axis(axis)
        except ValueError:
            raise UnsupportedAxisError(axis) from None
    raise UnsupportedAxisError(axis)


def identity():
    return np.eye(4, dtype=DTYPE)


def translation(tx, ty, tz):
    M = identity()
    M[0,3]=tx; M[1,3]=ty; M[2,3]=tz
    return M


def scale(sx, sy=None, sz=None):
    if sy is None: sy = sx
    if sz is None: sz = sx
    M = identity()
    M[0,0]=sx; M[1,1]=sy; M[2,2]=sz
    return M


def rotation(angle_deg, axis):
    """Right-handed rotation of angle_deg degrees about Axis.X or Axis.Y.

    Positive angles turn counter-clockwise when looking down the axis
    toward the origin.
    """
    axis = resolve_axis(axis)
    angle_rad = math.radians(angle_deg)
    logger.debug("Rotation of %.3f deg about %s", angle_deg, axis.name)
    x, y, z = _AXIS_VECTORS[axis]
    c = math.cos(angle_rad); s = math.sin(angle_rad); C = 1.0 - c
    R3 = np.array([
        [x*x*C + c,     x*y*C - z*s, x*z*C + y*s],
        [y*x*C + z*s,   y*y*C + c,   y*z*C - x*s],
        [z*x*C - y*s,   z*y*C + x*s, z*z*C + c  ],], dtype=DTYPE)
    M = identity()
    M[:3,:3] = R3
    return M


def perspective_projection(aspect_ratio, fov, near, far):
    """Perspective projection into normalized device coordinates.

    Points inside the view frustum end up in (-1, 1) on every axis after
    division by w; the near plane maps to z = -1, the far plane to z = 1.

    :param aspect_ratio: Width over height of the viewport.
    :param fov: Full vertical field of view in radians, in (0, pi).
    :param near: Distance to the near clipping plane, > 0.
    :param far: Distance to the far clipping plane, > near.
    :raises ProjectionParameterError: If the parameters do not describe a frustum.
    """
    if aspect_ratio <= 0:
        raise ProjectionParameterError(f"Aspect ratio must be positive, got {aspect_ratio}")
    if not 0.0 < fov < math.pi:
        raise ProjectionParameterError(f"Field of view must be in (0, pi) radians, got {fov}")
    if near <= 0:
        raise ProjectionParameterError(f"Near plane must be positive, got {near}")
    if far <= near:
        raise ProjectionParameterError(f"Far plane ({far}) must lie beyond near plane ({near})")

    logger.debug("Perspective aspect=%.3f fov=%.3f rad near=%.3f far=%.3f",
                 aspect_ratio, fov, near, far)
    f = 1.0 / math.tan(fov / 2.0)
    M = np.zeros((4,4), dtype=DTYPE)
    M[0,0] = f/aspect_ratio; M[1,1] = f
    M[2,2] = (far + near) / (near - far)
    M[2,3] = (2.0 * far * near) / (near - far)
    M[3,2] = -1.0
    return M
