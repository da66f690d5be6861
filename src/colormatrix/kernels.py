"""
Numba-optimized kernels for color matrix operations.

Provides JIT-compiled kernels applying a fixed-size color matrix to a batch
of color vectors, parallelized over vectors.
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

# ============================================================================
# Color Matrix Kernels
# ============================================================================


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def color_matrix_transform_numba(
    matrix: NDArray[np.float64],
    colors: np.ndarray,
    out: np.ndarray,
) -> None:
    """
    Apply an R x C color matrix to N-channel color vectors.

    Per vector and per row < R the output is the weighted sum of the first
    min(C, N) channels, plus the plain sum of columns N..C-1 (bias terms).
    Channels R..N-1 are copied through unchanged.

    Args:
        matrix: Coefficients [R, C]
        colors: Input color vectors [M, N], N >= R
        out: Output buffer [M, N] (pre-allocated, must not alias colors)

    Note: Modifies out in-place for efficiency
    """
    rows = matrix.shape[0]
    columns = matrix.shape[1]
    M = colors.shape[0]
    N = colors.shape[1]
    k = min(columns, N)

    for i in prange(M):
        for row in range(rows):
            acc = 0.0
            for column in range(k):
                acc += matrix[row, column] * colors[i, column]
            for column in range(N, columns):
                acc += matrix[row, column]
            out[i, row] = acc

        # Channels not covered by the matrix (e.g. alpha)
        for channel in range(rows, N):
            out[i, channel] = colors[i, channel]
