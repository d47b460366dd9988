"""Logging utilities for appspec.

This module provides a standalone structlog logger factory that writes
JSON-formatted or text-formatted logs to a file or to stderr. Each logger is
self-contained and does not modify global structlog configuration.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from appspec.config import LoggingConfig

LogFormatType = Literal["json", "text"]


def _log_level_from_string(level: str, *, respect_env: bool = True) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, APPSPEC_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer, WARNING for unknown names.
    """
    if respect_env and getenv("APPSPEC_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.WARNING)


def create_logger(
    *,
    level: str = "warning",
    log_format: LogFormatType = "text",
    log_file: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger.

    The level can be forced to DEBUG with the APPSPEC_DEBUG environment
    variable.

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to a log file opened in append mode. Logs go to
            stderr when empty.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger_factory = structlog.WriteLoggerFactory(file=log_path.open("a"))
    else:
        logger_factory = structlog.PrintLoggerFactory(file=sys.stderr)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(
        _log_level_from_string(level)
    )

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )


def create_logger_from_config(config: "LoggingConfig") -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger from the logging configuration section."""
    return create_logger(
        level=config.level.value,
        log_format=cast("LogFormatType", config.format.value),
        log_file=config.file,
    )
