"""
Legacy camera-relative projection.

look_at_projection predates perspective_projection and is kept for code
that still projects through an eye/at pair. New code should build a
perspective_projection instead.
"""
import logging
import warnings
import numpy as np

from .config import DTYPE, DEFAULT_DISTANCE, DEFAULT_UP
from .errors import DegenerateVectorError
from .vector_math import normalize, subtract, project, cross, dot

logger = logging.getLogger(__name__)


def look_at_projection(eye, at, up=DEFAULT_UP, distance=DEFAULT_DISTANCE):
    """Projects onto a viewport `distance` units in front of `eye`.

    The camera looks from eye toward at; up is made orthogonal to the
    view direction before use. The third row is zero, so depth is not
    kept.

    :raises DegenerateVectorError: If eye == at or up is parallel to the
        view direction.
    """
    warnings.warn("look_at_projection is deprecated, use perspective_projection",
                  DeprecationWarning, stacklevel=2)
    logger.warning("Deprecated look-at projection used (eye=%s, at=%s)",
                   np.asarray(eye).tolist(), np.asarray(at).tolist())

    try:
        n = normalize(subtract(at, eye))
        y = normalize(subtract(up, project(n, up)))
    except DegenerateVectorError as e:
        raise DegenerateVectorError(
            f"Cannot build a view basis from eye={np.asarray(eye).tolist()}, "
            f"at={np.asarray(at).tolist()}, up={np.asarray(up).tolist()}") from e
    x = normalize(cross(n, y))

    d = float(distance)
    return np.array([
        [x[0], x[1], x[2], -dot(x, eye)],
        [y[0], y[1], y[2], -dot(y, eye)],
        [0.0, 0.0, 0.0, 0.0],
        [n[0]/d, n[1]/d, n[2]/d, -dot(n, eye)/d]], dtype=DTYPE)
