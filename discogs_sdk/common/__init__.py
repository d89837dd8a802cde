"""Common utilities: configuration and logging."""

from .config import (
    DEFAULT_BASE_URL,
    AuthConfig,
    Config,
    DiscogsConfig,
    FileLoggingConfig,
    HTTPConfig,
    LoggingConfig,
)
from .logging_config import bind_context, clear_context, get_logger, setup_logging

__all__ = [
    "DEFAULT_BASE_URL",
    "AuthConfig",
    "Config",
    "DiscogsConfig",
    "FileLoggingConfig",
    "HTTPConfig",
    "LoggingConfig",
    "bind_context",
    "clear_context",
    "get_logger",
    "setup_logging",
]
