"""Affine colour matrices for the individual adjustments.

Every matrix has four rows (R, G, B, A outputs) and five columns: the first
four weight the input channels and the fifth is a translation expressed in
8-bit channel units.  All factories return read-only ``float64`` arrays so a
shared result cannot be mutated by a caller.
"""

from __future__ import annotations

import numpy as np

MATRIX_SHAPE = (4, 5)

# Luma weights used by the saturation matrix (Rec. 709 rounded).
_LUMA_R = 0.213
_LUMA_G = 0.715
_LUMA_B = 0.072

_CONTRAST_PIVOT = 128.0


def _freeze(matrix: np.ndarray) -> np.ndarray:
    matrix.flags.writeable = False
    return matrix


def _amount_fraction(amount: float) -> float:
    """Return *amount* mapped from ``[0, 100]`` to ``[0, 1]``, clamped."""

    return max(0.0, min(1.0, float(amount) / 100.0))


def identity_matrix() -> np.ndarray:
    """Return the no-op colour matrix."""

    matrix = np.zeros(MATRIX_SHAPE, dtype=np.float64)
    matrix[0, 0] = matrix[1, 1] = matrix[2, 2] = matrix[3, 3] = 1.0
    return _freeze(matrix)


def grayscale_matrix(amount: float) -> np.ndarray:
    """Return the saturation matrix that desaturates by *amount* percent.

    ``amount = 0`` keeps full saturation (identity) while ``amount = 100``
    collapses every pixel onto its luma so that R, G and B come out equal.
    """

    saturation = 1.0 - _amount_fraction(amount)
    inverse = 1.0 - saturation
    r = _LUMA_R * inverse
    g = _LUMA_G * inverse
    b = _LUMA_B * inverse
    matrix = np.array(
        [
            [r + saturation, g, b, 0.0, 0.0],
            [r, g + saturation, b, 0.0, 0.0],
            [r, g, b + saturation, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0, 0.0],
        ],
        dtype=np.float64,
    )
    return _freeze(matrix)


def brightness_matrix(amount: float) -> np.ndarray:
    """Return a diagonal RGB scale of ``amount / 100 * 2``.

    The scale is ``0`` at ``amount = 0`` which renders black, so the matrix
    must only be composed when ``amount > 0``.
    """

    scale = _amount_fraction(amount) * 2.0
    matrix = np.zeros(MATRIX_SHAPE, dtype=np.float64)
    matrix[0, 0] = matrix[1, 1] = matrix[2, 2] = scale
    matrix[3, 3] = 1.0
    return _freeze(matrix)


def contrast_matrix(amount: float) -> np.ndarray:
    """Return a contrast stretch around mid-gray (128 stays fixed)."""

    contrast = _amount_fraction(amount) * 1.9 + 0.1
    translation = _CONTRAST_PIVOT * (1.0 - contrast)
    matrix = np.zeros(MATRIX_SHAPE, dtype=np.float64)
    for channel in range(3):
        matrix[channel, channel] = contrast
        matrix[channel, 4] = translation
    matrix[3, 3] = 1.0
    return _freeze(matrix)


def sepia_matrix(amount: float) -> np.ndarray:
    """Return the sepia tone blended with the identity by *amount* percent."""

    remainder = 1.0 - _amount_fraction(amount)
    matrix = np.array(
        [
            [
                0.393 + 0.607 * remainder,
                0.769 - 0.769 * remainder,
                0.189 - 0.189 * remainder,
                0.0,
                0.0,
            ],
            [
                0.349 - 0.349 * remainder,
                0.686 + 0.314 * remainder,
                0.168 - 0.168 * remainder,
                0.0,
                0.0,
            ],
            [
                0.272 - 0.272 * remainder,
                0.534 - 0.534 * remainder,
                0.131 + 0.869 * remainder,
                0.0,
                0.0,
            ],
            [0.0, 0.0, 0.0, 1.0, 0.0],
        ],
        dtype=np.float64,
    )
    return _freeze(matrix)


def negative_matrix() -> np.ndarray:
    """Return the colour inversion ``x -> 255 - x`` on R, G and B."""

    matrix = np.zeros(MATRIX_SHAPE, dtype=np.float64)
    for channel in range(3):
        matrix[channel, channel] = -1.0
        matrix[channel, 4] = 255.0
    matrix[3, 3] = 1.0
    return _freeze(matrix)


__all__ = [
    "MATRIX_SHAPE",
    "brightness_matrix",
    "contrast_matrix",
    "grayscale_matrix",
    "identity_matrix",
    "negative_matrix",
    "sepia_matrix",
]
