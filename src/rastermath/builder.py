"""
Composition of translation, rotation, scale and projection.

The composite is always Projection x Translation x Rotation x Scale:
points are scaled in object space first, then rotated, moved into world
space and finally projected.
"""
import logging
from dataclasses import dataclass, field, replace
import numpy as np

from .camera import look_at_projection
from .errors import NonAffineMatrixError
from .matrix_math import affine_transform_matrix_mult, is_affine, matrix_matrix_mult, matrix_point_mult
from .transform import identity, translation, rotation, scale, perspective_projection

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class TransformConfig:
    """The four factors of a composite transform, identity by default."""
    translation: np.ndarray = field(default_factory=identity)
    rotation: np.ndarray = field(default_factory=identity)
    scale: np.ndarray = field(default_factory=identity)
    projection: np.ndarray = field(default_factory=identity)


def compose(config, points=None):
    """Builds P x T x R x S from config.

    translation, rotation and scale must be affine; the projection may be
    any 4x4 matrix. Without points the composite matrix is returned. With
    a batch of points (one per row) the composite is applied to each and
    the (N, 4) result is returned instead.

    :raises NonAffineMatrixError: If translation, rotation or scale has a
        bottom row other than [0, 0, 0, 1].
    """
    for name in ("translation", "rotation", "scale"):
        if not is_affine(getattr(config, name)):
            raise NonAffineMatrixError(f"TransformConfig.{name} must be an affine 4x4 matrix")
    model = affine_transform_matrix_mult(config.rotation, config.scale)
    model = affine_transform_matrix_mult(config.translation, model)
    composite = matrix_matrix_mult(config.projection, model)
    if points is not None:
        result = matrix_point_mult(composite, points)
        logger.debug("Composite applied to %d points", len(result))
        return result
    return composite


def _triple(x, y, z):
    # (x, y, z) scalars or a single 3-sequence in x
    if y is None and z is None:
        if np.ndim(x) != 1 or len(x) != 3:
            raise TypeError(f"Expected three scalars or one (x, y, z) sequence, got {x!r}")
        x, y, z = x
    elif y is None or z is None:
        raise TypeError("Expected three scalars or one (x, y, z) sequence")
    return x, y, z


class TransformBuilder:
    """Fluent builder around a TransformConfig.

    Each setter replaces its factor (calling translate twice keeps only
    the second translation) and returns the builder:

        points = TransformBuilder(mesh).scale(2).rotate(90, Axis.Y).translate(1, 0, 0).build()

    Not safe to share between threads.
    """

    def __init__(self, points=None):
        self.points = points
        self._config = TransformConfig()

    @property
    def config(self):
        return self._config

    def translate(self, x, y=None, z=None):
        self._config = replace(self._config, translation=translation(*_triple(x, y, z)))
        return self

    def rotate(self, angle_deg, axis):
        # an unsupported axis raises here, not at build()
        self._config = replace(self._config, rotation=rotation(angle_deg, axis))
        return self

    def scale(self, x, y=None, z=None):
        if y is None and z is None and np.ndim(x) == 0:
            self._config = replace(self._config, scale=scale(x))
        else:
            self._config = replace(self._config, scale=scale(*_triple(x, y, z)))
        return self

    def perspective(self, aspect_ratio, fov, near, far):
        self._config = replace(self._config,
                               projection=perspective_projection(aspect_ratio, fov, near, far))
        return self

    def project(self, eye, at):
        """Legacy look-at projection with the default up vector and distance."""
        self._config = replace(self._config, projection=look_at_projection(eye, at))
        return self

    def build(self):
        return compose(self._config, self.points)
