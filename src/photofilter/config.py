"""Editor configuration: export quality, output location and render executor."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigError
from .utils.jsonio import read_json
from .utils.logging import set_level

EXECUTORS = ("numpy", "jit")
"""Names accepted for :attr:`EditorConfig.executor`."""

DEFAULT_NAME_PREFIX = "CameraX-Image-Filtered"
DEFAULT_OUTPUT_DIR = Path.home() / "Pictures" / DEFAULT_NAME_PREFIX


@dataclass(frozen=True)
class EditorConfig:
    """Settings consumed by the export pipeline."""

    export_quality: int = 100
    output_dir: Path = field(default_factory=lambda: DEFAULT_OUTPUT_DIR)
    name_prefix: str = DEFAULT_NAME_PREFIX
    executor: str = "numpy"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        try:
            quality = int(self.export_quality)
        except (TypeError, ValueError) as exc:
            raise ConfigError(
                f"export_quality must be an integer, got {self.export_quality!r}"
            ) from exc
        if not 1 <= quality <= 100:
            raise ConfigError(f"export_quality must be within [1, 100], got {self.export_quality}")
        if self.executor not in EXECUTORS:
            raise ConfigError(f"executor must be one of {EXECUTORS}, got {self.executor!r}")
        if not self.name_prefix:
            raise ConfigError("name_prefix must not be empty")

    def apply_logging(self) -> None:
        """Apply :attr:`log_level` to the package logger."""

        try:
            set_level(self.log_level)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EditorConfig":
        """Build a config from *data*, ignoring unknown keys."""

        config = cls()
        overrides: dict[str, Any] = {}
        try:
            if "export_quality" in data:
                overrides["export_quality"] = int(data["export_quality"])
            if "output_dir" in data:
                overrides["output_dir"] = Path(str(data["output_dir"])).expanduser()
            if "name_prefix" in data:
                overrides["name_prefix"] = str(data["name_prefix"])
            if "executor" in data:
                overrides["executor"] = str(data["executor"])
            if "log_level" in data:
                overrides["log_level"] = str(data["log_level"]).upper()
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid configuration value: {exc}") from exc
        return replace(config, **overrides)


def load_config(path: Path | None) -> EditorConfig:
    """Return the :class:`EditorConfig` stored at *path*.

    A ``None`` path or a file that does not exist yields the defaults; a file
    that exists but cannot be parsed raises :class:`ConfigError`.
    """

    if path is None or not path.exists():
        return EditorConfig()
    return EditorConfig.from_mapping(read_json(path))


__all__ = ["DEFAULT_NAME_PREFIX", "DEFAULT_OUTPUT_DIR", "EXECUTORS", "EditorConfig", "load_config"]
