"""Select the executor that applies a colour matrix to raw pixels."""

from __future__ import annotations

import logging

import numpy as np

from ..color_matrix import MATRIX_SHAPE
from .jit_executor import apply_matrix_jit
from .numpy_executor import apply_matrix_vectorized

_LOGGER = logging.getLogger(__name__)

_EXECUTORS = {
    "numpy": apply_matrix_vectorized,
    "jit": apply_matrix_jit,
}

EXECUTORS = tuple(_EXECUTORS)


def apply_matrix(pixels: np.ndarray, matrix: np.ndarray, *, executor: str = "numpy") -> np.ndarray:
    """Return *pixels* transformed by *matrix* using the named *executor*.

    *pixels* must be a ``(height, width, 4)`` ``uint8`` array.  Every output
    channel is computed in floating point, clamped to ``[0, 255]`` and rounded
    half up, so bright pixels saturate instead of wrapping.
    """

    try:
        kernel = _EXECUTORS[executor]
    except KeyError:
        raise ValueError(f"Unknown executor {executor!r}; expected one of {EXECUTORS}") from None

    if pixels.ndim != 3 or pixels.shape[2] != 4:
        raise ValueError(f"pixels must have shape (height, width, 4), got {pixels.shape}")
    if matrix.shape != MATRIX_SHAPE:
        raise ValueError(f"colour matrix must have shape {MATRIX_SHAPE}, got {matrix.shape}")

    _LOGGER.debug(
        "Applying colour matrix to %dx%d pixels with %s executor",
        pixels.shape[1],
        pixels.shape[0],
        executor,
    )
    return kernel(pixels, matrix)
