"""discogs-sdk: async client for the Discogs REST API."""

from pathlib import Path
from typing import Optional

import structlog

from .client import Discogs
from .common.config import AuthConfig, Config, DiscogsConfig, HTTPConfig, LoggingConfig
from .common.logging_config import setup_logging
from .connection import (
    DiscogsConnection,
    DownloadInformation,
    KeySecretAuthInfo,
    OAuthFlow,
    OAuthInfo,
    TokenAuthInfo,
    TransferProgressCallback,
    UploadInformation,
)
from .exceptions import (
    AuthError,
    DiscogsError,
    ParseError,
    RequestError,
    ResponseError,
    ThrottledError,
    ValidationError,
)

__version__ = "0.1.0"
__all__ = [
    # Client
    "Discogs",
    "DiscogsConnection",
    "OAuthFlow",
    # Auth
    "KeySecretAuthInfo",
    "OAuthInfo",
    "TokenAuthInfo",
    # Transfers
    "DownloadInformation",
    "TransferProgressCallback",
    "UploadInformation",
    # Config
    "AuthConfig",
    "Config",
    "DiscogsConfig",
    "HTTPConfig",
    "LoggingConfig",
    "configure",
    "get_config",
    "setup_logging",
    # Exceptions
    "AuthError",
    "DiscogsError",
    "ParseError",
    "RequestError",
    "ResponseError",
    "ThrottledError",
    "ValidationError",
]

# Module-level logger (not configured yet)
logger = structlog.get_logger(__name__)

_config: Optional[Config] = None


def configure(config: Optional[Config] = None, config_path: Optional[Path] = None) -> Config:
    """
    Configure the discogs_sdk package.

    Call once at application startup to load configuration and set up
    logging. Clients are then created with ``Discogs.from_config``.

    Args:
        config: Pre-loaded Config object (takes precedence over config_path)
        config_path: Path to YAML configuration file

    Returns:
        The active Config

    Example:
        >>> import discogs_sdk
        >>> config = discogs_sdk.configure(config_path=Path("config.yaml"))
        >>> async with discogs_sdk.Discogs.from_config(config.discogs) as discogs:
        ...     ...
    """
    global _config

    if config is not None:
        _config = config
    elif config_path is not None:
        _config = Config.from_yaml(config_path)
    else:
        _config = Config()

    setup_logging(_config.logging)

    logger.info(
        "discogs_sdk_configured",
        version=__version__,
        config_path=str(config_path) if config_path else None,
        base_url=_config.discogs.base_url,
        auth_method=_config.discogs.auth.method,
    )
    return _config


def get_config() -> Config:
    """
    Get current configuration, initializing with defaults if needed.

    Returns:
        Current Config object
    """
    global _config
    if _config is None:
        _config = Config()
        setup_logging(_config.logging)
    return _config
