"""Export pipeline: decode, rotate, colour-transform, encode and persist."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from ..config import EditorConfig
from ..errors import DecodeError, EncodeError, PersistError
from ..io.codec import decode_image, encode_jpeg
from ..io.metadata import read_orientation_code
from ..io.storage import ImageStore
from ..messages import MESSAGE_LOAD_FAILED, MESSAGE_SAVE_FAILED, MESSAGE_SAVED
from ..utils.logging import get_logger
from .adjustments import AdjustmentState
from .compositor import build_combined_matrix
from .orientation import resolve_rotation
from .pixel_buffer import BufferLifecycle, PixelBuffer
from .renderer import render

_LOGGER = logging.getLogger(__name__)

Decoder = Callable[[bytes], PixelBuffer]
OrientationReader = Callable[[bytes], Any]
Encoder = Callable[[PixelBuffer, int], bytes]
Persister = Callable[[bytes, str], Any]
Notifier = Callable[[str], None]


def log_notification(message: str) -> None:
    """Default user notifier that writes *message* to the package logger."""

    get_logger("notify").info(message)


def suggested_name(prefix: str, moment: datetime) -> str:
    """Return ``<prefix>-yyyy-MM-dd-HH-mm-ss-SSS`` for *moment*."""

    millis = moment.microsecond // 1000
    return f"{prefix}-{moment:%Y-%m-%d-%H-%M-%S}-{millis:03d}"


class ExportPipeline:
    """Run the full export for one source image and one adjustment snapshot.

    Every collaborator can be replaced; the defaults use Pillow for decoding,
    orientation metadata and JPEG encoding and write files into
    ``config.output_dir``.
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        decode: Decoder = decode_image,
        read_orientation: OrientationReader = read_orientation_code,
        encode: Encoder = encode_jpeg,
        persist: Optional[Persister] = None,
        notify: Notifier = log_notification,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._config = config or EditorConfig()
        self._config.apply_logging()
        self._decode = decode
        self._read_orientation = read_orientation
        self._encode = encode
        self._persist = persist or ImageStore(self._config.output_dir).persist
        self._notify = notify
        self._clock = clock

    @property
    def config(self) -> EditorConfig:
        return self._config

    def _notify_user(self, message: str) -> None:
        # Notifications are fire-and-forget and must not change the export result.
        try:
            self._notify(message)
        except Exception:  # pragma: no cover - depends on the UI collaborator
            _LOGGER.exception("User notification failed: %s", message)

    def export(self, source: bytes, state: AdjustmentState | Mapping[str, Any]) -> Any:
        """Export *source* with *state* applied and return the storage handle.

        *state* may be an :class:`AdjustmentState` or a mapping of slider
        values.  It is clamped once on entry; later changes to the caller's state
        objects cannot affect an export already in progress.

        Raises
        ------
        DecodeError
            The source bytes could not be decoded.
        EncodeError, PersistError
            The rendered image could not be encoded or written.
        """

        snapshot = AdjustmentState.ensure(state)
        matrix = build_combined_matrix(snapshot)

        try:
            decoded = self._decode(source)
        except DecodeError:
            self._notify_user(MESSAGE_LOAD_FAILED)
            raise

        angle = resolve_rotation(self._read_orientation(source))
        _LOGGER.debug("Exporting %dx%d image, rotation %d", *decoded.size, int(angle))

        with BufferLifecycle() as buffers:
            output = render(
                decoded,
                angle,
                matrix,
                executor=self._config.executor,
                lifecycle=buffers,
            )
            buffers.track(output)
            try:
                payload = self._encode(output, self._config.export_quality)
            except EncodeError:
                self._notify_user(MESSAGE_SAVE_FAILED)
                raise
            finally:
                buffers.release(output)

        name = suggested_name(self._config.name_prefix, self._clock())
        try:
            handle = self._persist(payload, name)
        except PersistError:
            self._notify_user(MESSAGE_SAVE_FAILED)
            raise

        if isinstance(handle, Path):
            _LOGGER.info("Exported image to %s", handle)
        self._notify_user(MESSAGE_SAVED)
        return handle


__all__ = [
    "ExportPipeline",
    "MESSAGE_LOAD_FAILED",
    "MESSAGE_SAVED",
    "MESSAGE_SAVE_FAILED",
    "log_notification",
    "suggested_name",
]
