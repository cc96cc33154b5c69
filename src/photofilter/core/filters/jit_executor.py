"""JIT-accelerated colour matrix executor using Numba."""

from __future__ import annotations

import math

import numpy as np
from numba import jit


def apply_matrix_jit(pixels: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Return a new ``uint8`` array with *matrix* applied via the compiled kernel."""

    height, width = pixels.shape[:2]
    output = np.empty((height, width, 4), dtype=np.uint8)
    if width == 0 or height == 0:
        return output

    _apply_matrix_kernel(
        np.ascontiguousarray(pixels, dtype=np.uint8),
        np.ascontiguousarray(matrix, dtype=np.float64),
        output,
    )
    return output


@jit(nopython=True, cache=True)
def _apply_matrix_kernel(src: np.ndarray, matrix: np.ndarray, dst: np.ndarray) -> None:
    """JIT-compiled pixel processing kernel."""
    height = src.shape[0]
    width = src.shape[1]

    for y in range(height):
        for x in range(width):
            r = float(src[y, x, 0])
            g = float(src[y, x, 1])
            b = float(src[y, x, 2])
            a = float(src[y, x, 3])

            for row in range(4):
                value = (
                    matrix[row, 0] * r
                    + matrix[row, 1] * g
                    + matrix[row, 2] * b
                    + matrix[row, 3] * a
                    + matrix[row, 4]
                )
                if value < 0.0:
                    value = 0.0
                elif value > 255.0:
                    value = 255.0
                dst[y, x, row] = np.uint8(math.floor(value + 0.5))
