# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

This module provides the Pydantic models for appspec configuration and the
Config container that merges defaults, the project config file and
environment variables.
"""

from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar, Final, Self

from pydantic import BaseModel, ConfigDict, Field

from appspec.config._defaults import DEFAULT_CONFIG
from appspec.config._loader import deep_merge, parse_env_vars, read_toml_file

# Project-level config file, relative to the project root
CONFIG_FILE_NAME: Final = ".appspec.toml"

# Highest value accepted for storage.file_mode (setuid, setgid, sticky, rwx)
_MAX_FILE_MODE: Final = 0o7777


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class StorageConfig(BaseModel):
    """App spec storage configuration section."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    file_name: str = Field(default="app.yaml", description="App spec file name.")
    file_mode: int = Field(
        default=0o644, description="Permission bits for written app spec files."
    )


def _parse_log_level(value: Any) -> LogLevel:
    try:
        return LogLevel(str(value).lower())
    except ValueError:
        return LogLevel.WARNING


def _parse_log_format(value: Any) -> LogFormat:
    try:
        return LogFormat(str(value).lower())
    except ValueError:
        return LogFormat.TEXT


def _parse_file_mode(value: Any) -> int:
    """Parse permission bits written as octal digits, as chmod takes them.

    "644", "0644", "0o644" and the integer 644 all mean 0o644. Values that are
    not octal or fall outside 0..0o7777 fall back to the default.
    """
    default = StorageConfig().file_mode
    if isinstance(value, bool) or not isinstance(value, int | str):
        return default
    try:
        mode = int(str(value), 8)
    except ValueError:
        return default
    if not 0 <= mode <= _MAX_FILE_MODE:
        return default
    return mode


def _parse_logging(data: dict[str, Any]) -> LoggingConfig:
    return LoggingConfig(
        level=_parse_log_level(data.get("level", "warning")),
        format=_parse_log_format(data.get("format", "text")),
        file=str(data.get("file", "")),
    )


def _parse_storage(data: dict[str, Any]) -> StorageConfig:
    return StorageConfig(
        file_name=str(data.get("file_name") or "app.yaml"),
        file_mode=_parse_file_mode(data.get("file_mode", "644")),
    )


class Config(BaseModel):
    """Configuration container with typed access.

    Use the factory methods rather than the constructor. Invalid enum values
    fall back to their defaults instead of failing.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    sources: tuple[Path, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary merged over the defaults."""
        merged = deep_merge(DEFAULT_CONFIG, data)
        return cls(
            logging=_parse_logging(merged.get("logging", {})),
            storage=_parse_storage(merged.get("storage", {})),
        )

    @classmethod
    def load(
        cls,
        project_root: Path | None = None,
        *,
        include_env: bool = True,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources (lowest to highest precedence):
            1. Built-in defaults
            2. Project config (`<project_root>/.appspec.toml`)
            3. Environment variables (`APPSPEC_SECTION__KEY`)

        Args:
            project_root: Project root directory. If None, no config file is
                read.
            include_env: Include environment variables as a source.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If the project config file cannot be parsed.
        """
        merged: dict[str, Any] = deep_merge(DEFAULT_CONFIG, {})
        sources: list[Path] = []

        if project_root is not None:
            config_path = project_root / CONFIG_FILE_NAME
            if config_path.is_file():
                merged = deep_merge(merged, read_toml_file(config_path))
                sources.append(config_path)

        if include_env:
            merged = deep_merge(merged, parse_env_vars())

        return cls(
            logging=_parse_logging(merged.get("logging", {})),
            storage=_parse_storage(merged.get("storage", {})),
            sources=tuple(sources),
        )
