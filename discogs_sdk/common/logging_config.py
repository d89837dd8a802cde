"""Structured logging for the SDK's own ``discogs_sdk`` logger hierarchy."""

import logging
import logging.handlers
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import structlog

from .config import LoggingConfig

SDK_LOGGER_NAME = "discogs_sdk"
REDACTED = "***"

# Lower-cased event keys (and header names) whose values are never logged
SENSITIVE_KEYS = frozenset(
    {
        "authorization",
        "token",
        "secret",
        "token_secret",
        "oauth_token_secret",
        "oauth_verifier",
        "password",
    }
)

# httpx logs every request at INFO, which duplicates our own events
DEFAULT_THIRD_PARTY_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}


def _mask(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {
            k: REDACTED if str(k).lower() in SENSITIVE_KEYS else v for k, v in value.items()
        }
    return value


def redact_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """
    Structlog processor that masks credentials.

    Top-level keys such as ``token`` or ``authorization`` are replaced, and
    mappings (e.g. a ``headers`` dict) have their sensitive entries replaced.
    """
    for key, value in list(event_dict.items()):
        if key.lower() in SENSITIVE_KEYS:
            if value:
                event_dict[key] = REDACTED
        else:
            event_dict[key] = _mask(value)
    return event_dict


def _build_handlers(config: LoggingConfig, log_level: int) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if "console" in config.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        handlers.append(console_handler)

    if "file" in config.handlers and config.file:
        Path(config.file.path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=config.file.path,
            maxBytes=config.file.max_bytes,
            backupCount=config.file.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    return handlers


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure SDK logging.

    Handlers are attached to the ``discogs_sdk`` logger only; the root
    logger and any handlers the host application installed are left alone.
    When no handlers are configured, SDK records propagate to the host's
    logging setup instead. Calling this again replaces the previous SDK
    handlers.

    Args:
        config: LoggingConfig object with logging settings

    Example:
        >>> from discogs_sdk.common.config import LoggingConfig
        >>> setup_logging(LoggingConfig(level="DEBUG", format="text"))
    """
    log_level = getattr(logging, config.level.upper())

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    for handler in list(sdk_logger.handlers):
        sdk_logger.removeHandler(handler)
        handler.close()

    handlers = _build_handlers(config, log_level)
    for handler in handlers:
        sdk_logger.addHandler(handler)
    sdk_logger.setLevel(log_level)
    sdk_logger.propagate = not handlers

    third_party_config = {**DEFAULT_THIRD_PARTY_LEVELS, **config.third_party}
    for library, level in third_party_config.items():
        logging.getLogger(library).setLevel(getattr(logging, level.upper()))

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_secrets,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger; use a ``discogs_sdk.*`` name to reach the SDK handlers."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """
    Bind context variables that will be included in all subsequent log messages.

    Useful for tagging every event emitted during a batch job, for example
    with the username whose collection is being synced.

    Example:
        >>> bind_context(username="rodneyfool")
        >>> logger.info("collection_sync_started")  # Includes username
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
