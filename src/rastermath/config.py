"""Library-wide constants."""
import numpy as np

# Every vector and matrix produced by the library uses this dtype
DTYPE = np.float32

# Legacy look-at projection: camera to viewport distance and default up vector
DEFAULT_DISTANCE = 100.0
DEFAULT_UP = (0.0, 1.0, 0.0)

# Sine of the angle at a triangle's first vertex under which its points count as collinear
EPSILON = 1e-6

# Allowed deviation of the bottom row from [0, 0, 0, 1] in is_affine
AFFINE_TOLERANCE = 1e-6

# Packed 0xRRGGBB colors
MAX_COLOR = 0xFFFFFF
