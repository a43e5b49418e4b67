import logging

from .errors import (GeometryError, UnsupportedAxisError, DegenerateVectorError,
                     DegenerateTriangleError, ProjectionParameterError, NonAffineMatrixError)
from .vector_math import dot, cross, add, subtract, magnitude, normalize, mult, project
from .matrix_math import (matrix_vec_mult, affine_transform_vec_mult, matrix_matrix_mult,
                          affine_transform_matrix_mult, transpose, matrix_point_mult,
                          affine_point_mult, is_affine, normal_matrix)
from .transform import Axis, identity, translation, rotation, scale, perspective_projection
from .camera import look_at_projection
from .builder import TransformConfig, TransformBuilder, compose
from .triangle import Triangle
from .logging_config import setup_logging

__version__ = "0.1.0"

# silent unless the application configures logging (see setup_logging)
logging.getLogger(__name__).addHandler(logging.NullHandler())
