"""Live preview of the colour adjustments on the displayed buffer."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import numpy as np

from ..errors import DecodeError
from ..io.codec import decode_image
from ..messages import MESSAGE_LOAD_FAILED
from .adjustments import AdjustmentState
from .compositor import build_combined_matrix
from .pixel_buffer import PixelBuffer
from .renderer import apply_color_matrix

_LOGGER = logging.getLogger(__name__)


class PreviewSession:
    """Hold the buffer currently shown by the display layer.

    The preview never rotates or copies the displayed buffer.  Each slider
    change asks for a fresh filter via :meth:`filter_for`; the display applies
    it declaratively.  :meth:`render` exists for displays that need the
    filtered pixels materialised instead.
    """

    def __init__(self, buffer: PixelBuffer, *, executor: str = "numpy") -> None:
        self._buffer = buffer
        self._executor = executor

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        *,
        decode: Callable[[bytes], PixelBuffer] = decode_image,
        notify: Callable[[str], None] | None = None,
        executor: str = "numpy",
    ) -> "PreviewSession":
        """Decode *data* into a new session.

        On :class:`DecodeError` the user is told :data:`MESSAGE_LOAD_FAILED`
        through *notify* and the error propagates.
        """

        try:
            buffer = decode(data)
        except DecodeError:
            if notify is not None:
                notify(MESSAGE_LOAD_FAILED)
            raise
        return cls(buffer, executor=executor)

    @property
    def buffer(self) -> PixelBuffer:
        return self._buffer

    @property
    def is_disposed(self) -> bool:
        return self._buffer.is_disposed

    def filter_for(self, state: AdjustmentState | Mapping[str, Any]) -> np.ndarray:
        """Return the combined colour matrix for the current *state*."""

        return build_combined_matrix(state)

    def render(self, state: AdjustmentState | Mapping[str, Any]) -> PixelBuffer:
        """Return a new buffer with *state* applied to the displayed pixels.

        The displayed buffer stays live and unchanged; the caller owns the
        returned buffer.
        """

        matrix = self.filter_for(state)
        _LOGGER.debug("Rendering preview %dx%d", *self._buffer.size)
        return apply_color_matrix(self._buffer, matrix, executor=self._executor)

    def dispose(self) -> None:
        """Release the displayed buffer."""

        self._buffer.dispose()


__all__ = ["PreviewSession"]
