"""Triangle primitive with a precomputed face normal."""
import numbers
from dataclasses import dataclass, field
import numpy as np

from .config import DTYPE, EPSILON, MAX_COLOR
from .errors import DegenerateTriangleError
from .matrix_math import affine_point_mult
from .vector_math import cross, subtract, magnitude, normalize


@dataclass(frozen=True, eq=False)
class Triangle:
    """Three points, a packed 0xRRGGBB color and the face normal.

    The points must be given in counter-clockwise order: the normal,
    normalize(cross(p1 - p0, p2 - p0)), then points toward the viewer by
    the right hand rule. Winding cannot be checked here. Collinear or
    coincident points raise DegenerateTriangleError.

    Points are copied and made read-only, so the normal computed at
    construction stays valid.
    """
    points: np.ndarray
    color: int
    normal: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        P = np.array(self.points, dtype=DTYPE)
        if P.shape not in ((3, 3), (3, 4)):
            raise ValueError(f"A triangle needs 3 points of 3 or 4 components, got shape {P.shape}")
        # homogeneous input, keep x, y, z
        P = np.ascontiguousarray(P[:, :3])
        P.flags.writeable = False

        color = self.color
        # bool is an int subclass, True is not a color
        if not isinstance(color, numbers.Integral) or isinstance(color, bool):
            raise TypeError(f"Color must be an integer 0xRRGGBB value, got {color!r}")
        color = int(color)
        if not 0 <= color <= MAX_COLOR:
            raise ValueError(f"Color must be a packed 0xRRGGBB value, got {self.color!r}")

        e1 = subtract(P[1], P[0]); e2 = subtract(P[2], P[0])
        n = cross(e1, e2)
        # |e1 x e2| = |e1| |e2| sin(angle), so the test is on the angle, not the size
        if magnitude(n) <= EPSILON * magnitude(e1) * magnitude(e2):
            raise DegenerateTriangleError(f"Degenerate triangle {P.tolist()}")
        normal = normalize(n)
        normal.flags.writeable = False

        object.__setattr__(self, "points", P)
        object.__setattr__(self, "color", color)
        object.__setattr__(self, "normal", normal)

    def transformed(self, M):
        """New triangle with every point moved by the affine matrix M."""
        return Triangle(affine_point_mult(M, self.points), self.color)
