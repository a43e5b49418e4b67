"""Exceptions raised by rastermath."""


class GeometryError(ValueError):
    """Base class for every error raised by the library."""


class UnsupportedAxisError(GeometryError):
    """A rotation was requested about an axis other than X or Y."""

    def __init__(self, axis):
        self.axis = axis
        super().__init__(f"Unsupported rotation axis: {axis!r} (expected Axis.X or Axis.Y)")


class DegenerateVectorError(GeometryError):
    """A zero-length vector was given where a direction is required."""


class DegenerateTriangleError(GeometryError):
    """The three points of a triangle are collinear or coincident."""


class ProjectionParameterError(GeometryError):
    """Perspective parameters do not describe a valid view frustum."""


class NonAffineMatrixError(GeometryError):
    """A matrix whose bottom row is not [0, 0, 0, 1] was given where an affine one is required."""
