"""appspec utilities."""

from ._logging import create_logger, create_logger_from_config

__all__ = ["create_logger", "create_logger_from_config"]
