"""Pixel executors applying a colour matrix to an RGBA array.

- numpy_executor: vectorised NumPy implementation (default)
- jit_executor: Numba-compiled per-pixel kernel
- facade: executor selection
"""

from __future__ import annotations

from .facade import EXECUTORS, apply_matrix

__all__ = ["EXECUTORS", "apply_matrix"]
