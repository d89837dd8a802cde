"""Unit tests for configuration loading and validation."""

import pytest
import yaml
from pathlib import Path
from pydantic import ValidationError

from discogs_sdk.common.config import (
    AuthConfig,
    Config,
    DiscogsConfig,
    FileLoggingConfig,
    HTTPConfig,
    LoggingConfig,
)


class TestHTTPConfig:
    """Tests for HTTPConfig model."""

    def test_default_values(self):
        """Test default HTTP configuration values."""
        config = HTTPConfig()
        assert config.timeout == 30
        assert config.max_redirects == 5
        assert config.verify_ssl is True
        assert config.chunk_size == 8192

    def test_validation_constraints(self):
        """Test field validation constraints."""
        with pytest.raises(ValidationError):
            HTTPConfig(timeout=0)  # Must be >= 1

        with pytest.raises(ValidationError):
            HTTPConfig(timeout=301)  # Must be <= 300

        with pytest.raises(ValidationError):
            HTTPConfig(chunk_size=512)  # Must be >= 1024


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_default_values(self):
        """Test default logging configuration values."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.format == "json"
        assert config.handlers == ["console"]
        assert config.file is None

    def test_level_validation(self):
        """Test log level validation."""
        config = LoggingConfig(level="debug")  # Should be normalized to uppercase
        assert config.level == "DEBUG"

        with pytest.raises(ValidationError):
            LoggingConfig(level="INVALID")

    def test_format_validation(self):
        """Test log format validation."""
        assert LoggingConfig(format="TEXT").format == "text"

        with pytest.raises(ValidationError):
            LoggingConfig(format="xml")

    def test_handler_validation(self):
        """Test that unknown handlers are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(handlers=["console", "syslog"])


class TestAuthConfig:
    """Tests for AuthConfig model."""

    def test_default_method(self):
        """Test that the default is unauthenticated."""
        assert AuthConfig().method == "none"

    def test_method_validation(self):
        """Test that methods are normalized and validated."""
        assert AuthConfig(method="TOKEN").method == "token"

        with pytest.raises(ValidationError):
            AuthConfig(method="password")

    def test_env_overrides(self, monkeypatch):
        """Test that environment variables take precedence over stored values."""
        monkeypatch.setenv("DISCOGS_API_KEY", "env-key")
        monkeypatch.setenv("DISCOGS_API_SECRET", "env-secret")
        monkeypatch.setenv("DISCOGS_TOKEN", "env-token")

        config = AuthConfig(method="key_secret", key="file-key", secret="file-secret", token="t")
        resolved = config.resolved()

        assert resolved.key == "env-key"
        assert resolved.secret == "env-secret"
        assert resolved.token == "env-token"
        assert config.key == "file-key"

    def test_no_env_keeps_values(self):
        """Test that stored values are used when no environment overrides exist."""
        resolved = AuthConfig(method="token", token="file-token").resolved()
        assert resolved.token == "file-token"
        assert resolved.key is None


class TestDiscogsConfig:
    """Tests for DiscogsConfig model."""

    def test_defaults(self):
        """Test default client configuration."""
        config = DiscogsConfig()
        assert config.base_url == "https://api.discogs.com"
        assert config.user_agent == ""
        assert config.verify_auth is True

    def test_base_url_normalized(self):
        """Test that a trailing slash is removed."""
        assert DiscogsConfig(base_url="https://api.discogs.com/").base_url == (
            "https://api.discogs.com"
        )

    def test_invalid_base_url(self):
        """Test that the base URL needs a scheme."""
        with pytest.raises(ValidationError):
            DiscogsConfig(base_url="api.discogs.com")


class TestConfig:
    """Tests for main Config model."""

    def test_default_config(self):
        """Test default configuration."""
        config = Config()
        assert config.discogs.http.timeout == 30
        assert config.logging.level == "INFO"

    def test_file_handler_gets_default_file(self):
        """Test that enabling the file handler fills in a file config."""
        config = Config(logging=LoggingConfig(handlers=["file"]))
        assert isinstance(config.logging.file, FileLoggingConfig)
        assert config.logging.file.path == "logs/discogs_sdk.log"

    def test_from_yaml_string(self):
        """Test loading configuration from YAML string."""
        yaml_str = """
discogs:
  user_agent: "MyCollectionApp/1.0 +https://example.com"
  http:
    timeout: 60
  auth:
    method: token
    token: yaml-token
logging:
  level: DEBUG
  format: text
"""
        config = Config.from_yaml_string(yaml_str)
        assert config.discogs.user_agent == "MyCollectionApp/1.0 +https://example.com"
        assert config.discogs.http.timeout == 60
        assert config.discogs.auth.method == "token"
        assert config.discogs.auth.token == "yaml-token"
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "text"

    def test_empty_yaml(self):
        """Test that an empty document yields defaults."""
        config = Config.from_yaml_string("")
        assert config.discogs.base_url == "https://api.discogs.com"

    def test_from_yaml_file(self, tmp_path: Path):
        """Test loading configuration from YAML file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "discogs:\n"
            "  verify_auth: false\n"
            "  auth:\n"
            "    method: key_secret\n"
            "    key: ck\n"
            "    secret: cs\n"
        )

        config = Config.from_yaml(config_file)
        assert config.discogs.verify_auth is False
        assert config.discogs.auth.key == "ck"

    def test_from_yaml_missing_file(self, tmp_path: Path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml_values(self):
        """Test that invalid values fail validation."""
        with pytest.raises(ValidationError):
            Config.from_yaml_string("discogs:\n  http:\n    timeout: 0\n")

    def test_to_yaml_excludes_secrets(self, tmp_path: Path):
        """Test that saved configuration drops credentials."""
        config = Config(
            discogs=DiscogsConfig(
                user_agent="MyApp/1.0",
                auth=AuthConfig(
                    method="oauth",
                    key="ck",
                    secret="cs",
                    oauth_token="ot",
                    oauth_token_secret="ots",
                ),
            )
        )
        path = tmp_path / "nested" / "config.yaml"
        config.to_yaml(path)

        data = yaml.safe_load(path.read_text())
        auth = data["discogs"]["auth"]
        assert auth["key"] == "ck"
        assert auth["oauth_token"] == "ot"
        assert "secret" not in auth
        assert "oauth_token_secret" not in auth
        assert not path.with_suffix(".tmp").exists()

        reloaded = Config.from_yaml(path)
        assert reloaded.discogs.user_agent == "MyApp/1.0"
        assert reloaded.discogs.auth.method == "oauth"

    def test_to_yaml_with_secrets(self, tmp_path: Path):
        """Test that secrets can be kept explicitly."""
        config = Config(discogs=DiscogsConfig(auth=AuthConfig(method="token", token="t")))
        path = tmp_path / "config.yaml"
        config.to_yaml(path, exclude_secrets=False)

        assert yaml.safe_load(path.read_text())["discogs"]["auth"]["token"] == "t"
