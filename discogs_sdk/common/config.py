"""Configuration models using Pydantic for validation."""

import os
from pathlib import Path
from typing import Optional, Dict, List

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.discogs.com"


class HTTPConfig(BaseModel):
    """Configuration for HTTP client."""

    timeout: int = Field(
        default=30,
        ge=1,
        le=300,
        description="Request timeout in seconds",
    )
    max_redirects: int = Field(
        default=5,
        ge=0,
        le=20,
        description="Maximum number of redirects to follow",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify SSL certificates",
    )
    max_connections: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Maximum number of connections in the pool",
    )
    max_keepalive_connections: int = Field(
        default=20,
        ge=0,
        le=100,
        description="Maximum number of keep-alive connections",
    )
    chunk_size: int = Field(
        default=8192,
        ge=1024,
        le=10485760,
        description="Chunk size in bytes for file transfers",
    )


class FileLoggingConfig(BaseModel):
    """Configuration for file-based logging."""

    path: str = Field(
        default="logs/discogs_sdk.log",
        description="Path to log file",
    )
    max_bytes: int = Field(
        default=10485760,  # 10MB
        ge=1024,
        description="Maximum size of log file before rotation",
    )
    backup_count: int = Field(
        default=5,
        ge=0,
        le=50,
        description="Number of backup log files to keep",
    )


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    format: str = Field(
        default="json",
        description="Log format: json or text",
    )
    handlers: List[str] = Field(
        default_factory=lambda: ["console"],
        description="Enabled log handlers: console, file",
    )
    file: Optional[FileLoggingConfig] = Field(
        default=None,
        description="File logging configuration (optional)",
    )
    third_party: Dict[str, str] = Field(
        default_factory=dict,
        description="Log levels for third-party libraries",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {valid_levels}"
            )
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = ["json", "text"]
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(
                f"Invalid format: {v}. Must be one of {valid_formats}"
            )
        return v_lower

    @field_validator("handlers")
    @classmethod
    def validate_handlers(cls, v: List[str]) -> List[str]:
        """Validate handlers."""
        valid_handlers = ["console", "file"]
        for handler in v:
            if handler not in valid_handlers:
                raise ValueError(
                    f"Invalid handler: {handler}. Must be one of {valid_handlers}"
                )
        return v


class AuthConfig(BaseModel):
    """Credentials used to authenticate against the Discogs API.

    Environment variables take precedence over values stored here:
    DISCOGS_API_KEY and DISCOGS_API_SECRET for key/secret auth,
    DISCOGS_TOKEN for personal access tokens.
    """

    method: str = Field(
        default="none",
        description="Authentication method: none, key_secret, token, oauth",
    )
    key: Optional[str] = Field(default=None, description="Consumer key")
    secret: Optional[str] = Field(default=None, description="Consumer secret")
    token: Optional[str] = Field(default=None, description="Personal access token")
    oauth_token: Optional[str] = Field(
        default=None, description="OAuth access token"
    )
    oauth_token_secret: Optional[str] = Field(
        default=None, description="OAuth access token secret"
    )

    @field_validator("method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        """Validate authentication method."""
        valid_methods = ["none", "key_secret", "token", "oauth"]
        v_lower = v.lower()
        if v_lower not in valid_methods:
            raise ValueError(
                f"Invalid auth method: {v}. Must be one of {valid_methods}"
            )
        return v_lower

    def resolved(self) -> "AuthConfig":
        """Return a copy with environment overrides applied."""
        key = os.environ.get("DISCOGS_API_KEY") or self.key
        secret = os.environ.get("DISCOGS_API_SECRET") or self.secret
        token = os.environ.get("DISCOGS_TOKEN") or self.token
        return self.model_copy(update={"key": key, "secret": secret, "token": token})


class DiscogsConfig(BaseModel):
    """Configuration for a Discogs client instance."""

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL for the Discogs API",
    )
    user_agent: str = Field(
        default="",
        description="User-Agent header value (defaults to discogs-sdk/<version>)",
    )
    http: HTTPConfig = Field(
        default_factory=HTTPConfig,
        description="HTTP client configuration",
    )
    auth: AuthConfig = Field(
        default_factory=AuthConfig,
        description="Authentication configuration",
    )
    verify_auth: bool = Field(
        default=True,
        description="Check endpoint authentication requirements before sending",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate and normalize the base URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL: {v}. Must start with http:// or https://")
        return v.rstrip("/")


class Config(BaseModel):
    """Main configuration class for discogs-sdk."""

    discogs: DiscogsConfig = Field(
        default_factory=DiscogsConfig,
        description="Discogs client configuration",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    @model_validator(mode="after")
    def validate_file_logging(self) -> "Config":
        """Ensure file logging has a target when the file handler is enabled."""
        if "file" in self.logging.handlers and self.logging.file is None:
            self.logging.file = FileLoggingConfig()
        return self

    @classmethod
    def from_yaml(cls, path: Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config object with validated configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML is invalid
            pydantic.ValidationError: If configuration is invalid

        Example:
            >>> from pathlib import Path
            >>> config = Config.from_yaml(Path("config.yaml"))
        """
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    @classmethod
    def from_yaml_string(cls, yaml_string: str) -> "Config":
        """
        Load configuration from YAML string.

        Args:
            yaml_string: YAML configuration as string

        Returns:
            Config object with validated configuration

        Example:
            >>> yaml_str = "discogs:\\n  http:\\n    timeout: 60"
            >>> config = Config.from_yaml_string(yaml_str)
        """
        data = yaml.safe_load(yaml_string)
        return cls.model_validate(data or {})

    def to_yaml(
        self,
        path: Path,
        exclude_defaults: bool = True,
        exclude_secrets: bool = True,
    ) -> None:
        """
        Save configuration to YAML file with atomic write.

        Args:
            path: Path to YAML configuration file
            exclude_defaults: Exclude fields with default values
            exclude_secrets: Drop credentials from the auth section

        Raises:
            OSError: If file cannot be written
            yaml.YAMLError: If serialization fails
        """
        data = self.model_dump(
            mode="python",
            exclude_none=True,
            exclude_defaults=exclude_defaults,
        )

        if exclude_secrets:
            auth = data.get("discogs", {}).get("auth")
            if auth:
                for secret_field in ("secret", "token", "oauth_token_secret"):
                    auth.pop(secret_field, None)

        # Atomic write: temp file + fsync + rename
        temp_path = path.with_suffix(".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            with open(temp_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(
                    data,
                    f,
                    default_flow_style=False,
                    allow_unicode=True,
                    sort_keys=False,
                )
                f.flush()
                os.fsync(f.fileno())

            temp_path.replace(path)

            logger.info("config_saved", path=str(path))

        except OSError as e:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)

            logger.error("config_save_failed", path=str(path), error=str(e))
            raise
