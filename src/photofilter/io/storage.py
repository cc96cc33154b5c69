"""Write exported images into the configured output directory."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import PersistError
from ..utils.jsonio import atomic_write_bytes

_LOGGER = logging.getLogger(__name__)


class ImageStore:
    """Persist encoded exports as files under *directory*."""

    def __init__(self, directory: Path, *, extension: str = ".jpg") -> None:
        self._directory = Path(directory)
        self._extension = extension

    @property
    def directory(self) -> Path:
        return self._directory

    def _target_for(self, suggested_name: str) -> Path:
        candidate = self._directory / f"{suggested_name}{self._extension}"
        counter = 1
        while candidate.exists():
            candidate = self._directory / f"{suggested_name}-{counter}{self._extension}"
            counter += 1
        return candidate

    def persist(self, data: bytes, suggested_name: str) -> Path:
        """Write *data* and return the path of the new file.

        An existing file with the same name is never overwritten; a numeric
        suffix is appended instead.
        """

        if not suggested_name or Path(suggested_name).name != suggested_name:
            raise PersistError(f"Invalid export name: {suggested_name!r}")
        try:
            target = self._target_for(suggested_name)
            atomic_write_bytes(target, data)
        except OSError as exc:
            raise PersistError(f"Failed to write export into {self._directory}: {exc}") from exc
        _LOGGER.debug("Persisted %d bytes to %s", len(data), target)
        return target


__all__ = ["ImageStore"]
