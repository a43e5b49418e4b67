"""
Matrix products for 4x4 row-major transforms.

Two families of routines live here:

* the general products (matrix_vec_mult, matrix_matrix_mult,
  matrix_point_mult), correct for any 4x4 input;
* the affine fast paths (affine_transform_vec_mult,
  affine_transform_matrix_mult, affine_point_mult), which assume the
  bottom row of every matrix operand is [0, 0, 0, 1] and skip the
  multiplications that row would contribute.

The affine assumption is a precondition of the fast paths and is not
checked there: a projection matrix passed to them gives a wrong result,
not an error. Use is_affine at the boundary when the input is not known
to be affine.
"""
import numpy as np

from .config import DTYPE, AFFINE_TOLERANCE

_BOTTOM_ROW = np.array([0.0, 0.0, 0.0, 1.0], dtype=DTYPE)


def _mat4(M):
    M = np.asarray(M, dtype=DTYPE)
    if M.shape != (4, 4):
        raise ValueError(f"Expected a 4x4 matrix, got shape {M.shape}")
    return M


def matrix_vec_mult(M, v):
    """M @ v for a 4x4 matrix and a 4-vector."""
    return _mat4(M) @ np.asarray(v, dtype=DTYPE)


def affine_transform_vec_mult(M, v):
    """M @ v for an affine M and a point with w = 1, returned as (x, y, z).

    Only the upper 3x3 block is multiplied; the translation column is
    added for the implied w = 1. Equals matrix_vec_mult(M, v)[:3] while
    M[3] == [0, 0, 0, 1] and v[3] == 1. A 3-vector is accepted as v.
    """
    M = _mat4(M)
    v = np.asarray(v, dtype=DTYPE)
    return M[:3, :3] @ v[:3] + M[:3, 3]


def matrix_matrix_mult(M, N):
    return _mat4(M) @ _mat4(N)


def affine_transform_matrix_mult(M, N):
    """M @ N for two affine matrices.

    The 3x3 blocks are multiplied directly (N's bottom row contributes
    nothing to them), the translation column is M's block applied to
    N's translation plus M's own translation, and the bottom row is
    written as [0, 0, 0, 1].
    """
    M = _mat4(M); N = _mat4(N)
    out = np.empty((4, 4), dtype=DTYPE)
    out[:3, :3] = M[:3, :3] @ N[:3, :3]
    out[:3, 3] = M[:3, :3] @ N[:3, 3] + M[:3, 3]
    out[3] = _BOTTOM_ROW
    return out


def transpose(A):
    """Transpose of any 2-D matrix (rows x cols -> cols x rows)."""
    A = np.asarray(A, dtype=DTYPE)
    if A.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got {A.ndim} dimensions")
    return A.T.copy()


def _points4(points):
    # batch of (x, y, z) or (x, y, z, w) rows; 3-D points get w = 1
    P = np.asarray(points, dtype=DTYPE)
    if P.ndim in (1, 2) and P.shape[0] == 0:
        return np.empty((0, 4), dtype=DTYPE)
    if P.ndim != 2 or P.shape[1] not in (3, 4):
        raise ValueError(f"Expected a batch of 3 or 4 component points, got shape {P.shape}")
    if P.shape[1] == 3:
        P = np.hstack([P, np.ones((P.shape[0], 1), dtype=DTYPE)])
    return P


def matrix_point_mult(A, points):
    """Applies A to every point of a batch, one point per row.

    Row i of the result equals matrix_vec_mult(A, points[i]).
    """
    return _points4(points) @ _mat4(A).T


def affine_point_mult(A, points):
    """Batch form of affine_transform_vec_mult; returns (N, 3)."""
    A = _mat4(A)
    P = _points4(points)
    return P[:, :3] @ A[:3, :3].T + A[:3, 3]


def is_affine(M, tol=AFFINE_TOLERANCE):
    """True when M is 4x4 with a bottom row of [0, 0, 0, 1]."""
    M = np.asarray(M, dtype=DTYPE)
    if M.shape != (4, 4):
        return False
    return bool(np.allclose(M[3], _BOTTOM_ROW, rtol=0.0, atol=tol))


def normal_matrix(M):
    """Inverse transpose of the upper 3x3 block, for transforming normals."""
    N = _mat4(M)[:3, :3]
    return np.linalg.inv(N).T.astype(DTYPE)
