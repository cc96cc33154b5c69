"""Exception hierarchy shared across photofilter."""

from __future__ import annotations


class PhotoFilterError(Exception):
    """Base class for recoverable photofilter errors."""


class DecodeError(PhotoFilterError):
    """Raised when the source bytes cannot be decoded into pixels."""


class EncodeError(PhotoFilterError):
    """Raised when a rendered buffer cannot be encoded for export."""


class PersistError(PhotoFilterError):
    """Raised when the encoded export cannot be written to storage."""


class ConfigError(PhotoFilterError):
    """Raised when a configuration file is missing fields or malformed."""


class LifecycleError(AssertionError):
    """Raised when a disposed :class:`PixelBuffer` is used.

    This signals a programming error rather than a runtime condition and is
    deliberately kept outside :class:`PhotoFilterError` so callers handling
    recoverable failures never swallow it.
    """


__all__ = [
    "ConfigError",
    "DecodeError",
    "EncodeError",
    "LifecycleError",
    "PersistError",
    "PhotoFilterError",
]
