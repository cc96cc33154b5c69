"""Rotate a pixel buffer and apply the combined colour matrix to it."""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Optional

import numpy as np

from .filters import apply_matrix
from .orientation import RotationAngle
from .pixel_buffer import BufferLifecycle, PixelBuffer

_LOGGER = logging.getLogger(__name__)


def rotate_buffer(buffer: PixelBuffer, angle: RotationAngle) -> PixelBuffer:
    """Return *buffer* rotated clockwise by *angle*.

    ``DEG_0`` hands back *buffer* itself.  Any other angle produces a new
    buffer (width and height swap for 90 and 270 degrees) and disposes the
    source once the copy exists.
    """

    angle = RotationAngle(angle)
    if angle is RotationAngle.DEG_0:
        return buffer

    # ``np.rot90`` turns counter-clockwise for positive ``k``.
    rotated = np.ascontiguousarray(np.rot90(buffer.pixels, k=-angle.quarter_turns))
    result = PixelBuffer(rotated)
    if angle.swaps_dimensions:
        _LOGGER.debug(
            "Rotation by %d degrees swapped %dx%d to %dx%d",
            int(angle),
            *buffer.size,
            *result.size,
        )
    buffer.dispose()
    return result


def apply_color_matrix(
    buffer: PixelBuffer,
    matrix: np.ndarray,
    *,
    executor: str = "numpy",
) -> PixelBuffer:
    """Return a new buffer with *matrix* applied to every pixel of *buffer*.

    *buffer* stays live; the caller decides when to dispose it.
    """

    return PixelBuffer(apply_matrix(buffer.pixels, matrix, executor=executor))


def render(
    source: PixelBuffer,
    angle: RotationAngle,
    matrix: np.ndarray,
    *,
    executor: str = "numpy",
    lifecycle: Optional[BufferLifecycle] = None,
) -> PixelBuffer:
    """Produce the export buffer from *source*.

    *source* is consumed: it is disposed once its successor exists, whether
    that successor is the rotated copy or, for ``DEG_0``, the colour output.
    The returned buffer is owned by the caller.
    """

    # An outer lifecycle stays open; the caller releases whatever it still tracks.
    scope = BufferLifecycle() if lifecycle is None else nullcontext(lifecycle)
    with scope as buffers:
        buffers.track(source)
        rotated = buffers.track(rotate_buffer(source, angle))
        if rotated is not source:
            buffers.release(source)

        output = buffers.track(apply_color_matrix(rotated, matrix, executor=executor))
        buffers.release(rotated)
        return buffers.hand_off(output)


__all__ = ["apply_color_matrix", "render", "rotate_buffer"]
