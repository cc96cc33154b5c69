"""Logging helpers for photofilter.

Modules log through ``logging.getLogger(__name__)``; every such logger sits
below the ``photofilter`` package logger, which owns the only handler.
"""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER = "photofilter"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_PACKAGE: Optional[logging.Logger] = None


def _configure() -> logging.Logger:
    global _PACKAGE
    if _PACKAGE is None:
        package = logging.getLogger(PACKAGE_LOGGER)
        if not package.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            package.addHandler(handler)
        package.setLevel(logging.INFO)
        _PACKAGE = package
    return _PACKAGE


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or its child ``photofilter.<name>``.

    The package logger is configured on first use; children carry no
    handler of their own and propagate to it.
    """

    package = _configure()
    if not name:
        return package
    prefix = PACKAGE_LOGGER + "."
    if name.startswith(prefix):
        name = name[len(prefix):]
    return package.getChild(name)


def parse_level(level: str | int) -> int:
    """Return the numeric level for *level*, a name such as ``"debug"`` or an int."""

    if isinstance(level, bool):
        raise ValueError(f"Unknown log level: {level!r}")
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(str(level).strip().upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return numeric


def set_level(level: str | int) -> None:
    """Apply *level* to the package logger and therefore to every module logger."""

    _configure().setLevel(parse_level(level))


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "get_logger", "parse_level", "set_level"]
