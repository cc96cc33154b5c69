"""NumPy vectorised executor for colour matrices.

Each output channel is accumulated in ``float64`` in the same term order as
the JIT kernel so both executors agree bit for bit.
"""

from __future__ import annotations

import numpy as np


def apply_matrix_vectorized(pixels: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Return a new ``uint8`` array with *matrix* applied to every pixel of *pixels*."""

    height, width = pixels.shape[:2]
    output = np.empty((height, width, 4), dtype=np.uint8)
    if width == 0 or height == 0:
        return output

    source = pixels.astype(np.float64)
    r = source[..., 0]
    g = source[..., 1]
    b = source[..., 2]
    a = source[..., 3]

    for row in range(4):
        channel = (
            matrix[row, 0] * r
            + matrix[row, 1] * g
            + matrix[row, 2] * b
            + matrix[row, 3] * a
            + matrix[row, 4]
        )
        # Saturate before quantising; casting first would wrap around.
        np.clip(channel, 0.0, 255.0, out=channel)
        output[..., row] = np.floor(channel + 0.5).astype(np.uint8)

    return output
