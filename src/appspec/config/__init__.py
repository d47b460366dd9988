"""appspec configuration.

This module provides the public API for appspec configuration: loading,
merging, and typed access to configuration values.

Example:
    >>> from appspec.config import Config
    >>> config = Config.load()
    >>> config.storage.file_name
    'app.yaml'
"""

from appspec.exceptions import ConfigError, ConfigLoadError

from ._defaults import DEFAULT_CONFIG
from ._loader import deep_merge, parse_env_vars, read_toml_file, set_nested_key
from ._models import (
    CONFIG_FILE_NAME,
    Config,
    LogFormat,
    LoggingConfig,
    LogLevel,
    StorageConfig,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_CONFIG",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "StorageConfig",
    "deep_merge",
    "parse_env_vars",
    "read_toml_file",
    "set_nested_key",
]
