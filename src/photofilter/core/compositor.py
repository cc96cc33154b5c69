"""Compose the active adjustment matrices into one combined transform."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

import numpy as np

from .adjustments import ADJUSTMENT_ORDER, AdjustmentState
from .color_matrix import (
    MATRIX_SHAPE,
    brightness_matrix,
    contrast_matrix,
    grayscale_matrix,
    identity_matrix,
    negative_matrix,
    sepia_matrix,
)

_HOMOGENEOUS_ROW = np.array([[0.0, 0.0, 0.0, 0.0, 1.0]], dtype=np.float64)


def _to_homogeneous(matrix: np.ndarray) -> np.ndarray:
    if matrix.shape != MATRIX_SHAPE:
        raise ValueError(f"colour matrix must have shape {MATRIX_SHAPE}, got {matrix.shape}")
    return np.vstack([np.asarray(matrix, dtype=np.float64), _HOMOGENEOUS_ROW])


def concat(first: np.ndarray, then: np.ndarray) -> np.ndarray:
    """Return the matrix equivalent to applying *first* and then *then*."""

    combined = _to_homogeneous(then) @ _to_homogeneous(first)
    result = np.ascontiguousarray(combined[:4])
    result.flags.writeable = False
    return result


def compose(matrices: Iterable[np.ndarray]) -> np.ndarray:
    """Fold *matrices* left to right, starting from the identity."""

    combined = identity_matrix()
    for matrix in matrices:
        combined = concat(combined, matrix)
    return combined


def _gates(state: AdjustmentState) -> dict[str, tuple[bool, Callable[[], np.ndarray]]]:
    return {
        "grayscale": (state.gray_amount > 0, lambda: grayscale_matrix(state.gray_amount)),
        # A zero brightness scale renders black, so the gate must stay strict.
        "brightness": (
            state.brightness_amount > 0,
            lambda: brightness_matrix(state.brightness_amount),
        ),
        "contrast": (state.contrast_amount > 0, lambda: contrast_matrix(state.contrast_amount)),
        "sepia": (state.sepia_amount > 0, lambda: sepia_matrix(state.sepia_amount)),
        "negative": (state.negative_enabled, negative_matrix),
    }


def active_matrices(state: AdjustmentState | Mapping[str, Any]) -> list[tuple[str, np.ndarray]]:
    """Return ``(name, matrix)`` pairs for every enabled adjustment.

    Pairs follow :data:`ADJUSTMENT_ORDER`; colour matrices do not commute so
    reordering them changes the rendered output.
    *state* may also be a mapping of slider values keyed like the
    :class:`AdjustmentState` fields.
    """

    gates = _gates(AdjustmentState.ensure(state))
    active: list[tuple[str, np.ndarray]] = []
    for name in ADJUSTMENT_ORDER:
        enabled, factory = gates[name]
        if enabled:
            active.append((name, factory()))
    return active


def build_combined_matrix(state: AdjustmentState | Mapping[str, Any]) -> np.ndarray:
    """Return the single colour matrix for *state*.

    Both the live preview and the export path call this function so the two
    can never drift apart.  A neutral state yields the identity matrix.
    """

    return compose(matrix for _, matrix in active_matrices(state))


__all__ = ["active_matrices", "build_combined_matrix", "compose", "concat"]
