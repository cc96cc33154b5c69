"""Owned RGBA pixel buffers and their disposal bookkeeping."""

from __future__ import annotations

import logging
from enum import Enum
from types import TracebackType
from typing import Optional

import numpy as np

from ..errors import LifecycleError

_LOGGER = logging.getLogger(__name__)

CHANNELS = 4


class BufferState(Enum):
    """Lifecycle state of a :class:`PixelBuffer`."""

    LIVE = "live"
    DISPOSED = "disposed"


class PixelBuffer:
    """A ``height`` x ``width`` grid of 8-bit R, G, B, A pixels.

    The buffer owns its array exclusively.  Once :meth:`dispose` runs, the
    array is dropped and any further access to :attr:`pixels` raises
    :class:`LifecycleError`.
    """

    __slots__ = ("_pixels", "_width", "_height", "_state")

    def __init__(self, pixels: np.ndarray) -> None:
        array = np.asarray(pixels)
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ValueError(f"pixel array must have shape (height, width, 4), got {array.shape}")
        if array.dtype != np.uint8:
            raise ValueError(f"pixel array must be uint8, got {array.dtype}")
        self._pixels: Optional[np.ndarray] = np.ascontiguousarray(array)
        self._height = int(array.shape[0])
        self._width = int(array.shape[1])
        self._state = BufferState.LIVE

    @classmethod
    def allocate(cls, width: int, height: int) -> "PixelBuffer":
        """Return a zero-filled buffer of the given dimensions."""

        if width < 0 or height < 0:
            raise ValueError(f"buffer dimensions must be non-negative, got {width}x{height}")
        return cls(np.zeros((height, width, CHANNELS), dtype=np.uint8))

    @classmethod
    def filled(cls, width: int, height: int, rgba: tuple[int, int, int, int]) -> "PixelBuffer":
        """Return a buffer where every pixel equals *rgba*."""

        buffer = cls.allocate(width, height)
        buffer.pixels[...] = np.asarray(rgba, dtype=np.uint8)
        return buffer

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        """``(width, height)`` of the buffer."""

        return self._width, self._height

    @property
    def state(self) -> BufferState:
        return self._state

    @property
    def is_disposed(self) -> bool:
        return self._state is BufferState.DISPOSED

    @property
    def pixels(self) -> np.ndarray:
        """The live ``(height, width, 4)`` array backing the buffer."""

        if self._state is BufferState.DISPOSED or self._pixels is None:
            raise LifecycleError(f"PixelBuffer {self._width}x{self._height} used after dispose")
        return self._pixels

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the ``(R, G, B, A)`` tuple at column *x*, row *y*."""

        r, g, b, a = (int(channel) for channel in self.pixels[y, x])
        return r, g, b, a

    def dispose(self) -> None:
        """Release the pixel array; calling this again is a no-op."""

        if self._state is BufferState.DISPOSED:
            return
        self._pixels = None
        self._state = BufferState.DISPOSED

    def __repr__(self) -> str:
        return f"PixelBuffer({self._width}x{self._height}, {self._state.value})"


class BufferLifecycle:
    """Track intermediate buffers so each one is released exactly once.

    Use as a context manager.  Buffers registered with :meth:`track` are
    disposed either explicitly through :meth:`release` or, if still pending,
    when the context exits.  :meth:`hand_off` removes a buffer from tracking
    and transfers its ownership to the caller.
    """

    def __init__(self) -> None:
        self._tracked: list[PixelBuffer] = []
        self._released = 0

    @property
    def pending(self) -> int:
        """Number of buffers that are tracked but not yet released."""

        return len(self._tracked)

    @property
    def released(self) -> int:
        """Number of buffers this lifecycle has disposed so far."""

        return self._released

    def _index(self, buffer: PixelBuffer) -> int:
        for index, candidate in enumerate(self._tracked):
            if candidate is buffer:
                return index
        return -1

    def track(self, buffer: PixelBuffer) -> PixelBuffer:
        """Register *buffer* and return it unchanged."""

        if buffer.is_disposed:
            raise LifecycleError("cannot track a disposed PixelBuffer")
        if self._index(buffer) < 0:
            self._tracked.append(buffer)
        return buffer

    def release(self, buffer: PixelBuffer) -> None:
        """Dispose *buffer* if it is tracked; untracked or repeated calls do nothing."""

        index = self._index(buffer)
        if index < 0:
            return
        del self._tracked[index]
        if not buffer.is_disposed:
            buffer.dispose()
            self._released += 1

    def hand_off(self, buffer: PixelBuffer) -> PixelBuffer:
        """Stop tracking *buffer* and return it to the new owner."""

        index = self._index(buffer)
        if index >= 0:
            del self._tracked[index]
        # Reading ``pixels`` asserts the buffer is still live.
        _ = buffer.pixels
        return buffer

    def release_all(self) -> None:
        for buffer in list(self._tracked):
            self.release(buffer)

    def __enter__(self) -> "BufferLifecycle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._tracked:
            _LOGGER.debug("Releasing %d pending buffer(s)", len(self._tracked))
        self.release_all()


__all__ = ["BufferLifecycle", "BufferState", "CHANNELS", "PixelBuffer"]
