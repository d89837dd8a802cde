"""Tests for structlog setup and context helpers."""

import json
import logging

import pytest
import structlog

from discogs_sdk.common.config import FileLoggingConfig, LoggingConfig
from discogs_sdk.common.logging_config import (
    REDACTED,
    SDK_LOGGER_NAME,
    bind_context,
    clear_context,
    get_logger,
    redact_secrets,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore structlog and SDK logger state after each test."""
    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    original_handlers = list(sdk_logger.handlers)
    original_level = sdk_logger.level
    original_propagate = sdk_logger.propagate
    yield
    clear_context()
    structlog.reset_defaults()
    for handler in sdk_logger.handlers:
        if handler not in original_handlers:
            handler.close()
    sdk_logger.handlers[:] = original_handlers
    sdk_logger.setLevel(original_level)
    sdk_logger.propagate = original_propagate


class TestSetupLogging:
    """Test suite for setup_logging."""

    def test_json_console_output(self, capsys):
        """Test that events are rendered as JSON on the console."""
        setup_logging(LoggingConfig(level="INFO", format="json"))

        get_logger("discogs_sdk.test").info("discogs_get_release", release_id=249504)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "discogs_get_release"
        assert event["release_id"] == 249504
        assert event["level"] == "info"
        assert event["logger"] == "discogs_sdk.test"
        assert "timestamp" in event

    def test_level_filters_events(self, capsys):
        """Test that events below the configured level are dropped."""
        setup_logging(LoggingConfig(level="WARNING", format="json"))

        logger = get_logger("discogs_sdk.test")
        logger.info("discogs_hidden")
        logger.warning("discogs_request_failed", status_code=404)

        output = capsys.readouterr().err
        assert "discogs_hidden" not in output
        assert "discogs_request_failed" in output

    def test_text_format(self, capsys):
        """Test the human-readable console renderer."""
        setup_logging(LoggingConfig(level="DEBUG", format="text"))

        get_logger("discogs_sdk.test").debug("discogs_connection_opened", timeout=30)

        output = capsys.readouterr().err
        assert "discogs_connection_opened" in output
        with pytest.raises(json.JSONDecodeError):
            json.loads(output.strip().splitlines()[-1])

    def test_file_handler(self, tmp_path):
        """Test that the file handler writes JSON lines to the configured path."""
        log_file = tmp_path / "logs" / "sdk.log"
        setup_logging(
            LoggingConfig(
                level="INFO",
                format="json",
                handlers=["file"],
                file=FileLoggingConfig(path=str(log_file)),
            )
        )

        get_logger("discogs_sdk.test").info("discogs_upload_inventory", mode="add")
        for handler in logging.getLogger(SDK_LOGGER_NAME).handlers:
            handler.flush()

        event = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert event["event"] == "discogs_upload_inventory"
        assert event["mode"] == "add"

    def test_third_party_levels(self):
        """Test that noisy HTTP libraries are quieted by default and configurable."""
        setup_logging(LoggingConfig(third_party={"httpcore": "ERROR"}))

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.ERROR

    def test_root_logger_untouched(self):
        """Test that only the SDK logger hierarchy gets handlers."""
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        root_level = root.level
        try:
            setup_logging(LoggingConfig(level="DEBUG"))

            assert host_handler in root.handlers
            assert root.level == root_level
            sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
            assert len(sdk_logger.handlers) == 1
            assert sdk_logger.propagate is False
        finally:
            root.removeHandler(host_handler)

    def test_non_sdk_loggers_not_captured(self, capsys):
        """Test that the host application's own loggers do not reach SDK handlers."""
        setup_logging(LoggingConfig(level="INFO", format="json"))

        get_logger("host_app.jobs").info("host_event")
        get_logger("discogs_sdk.test").info("sdk_event")

        output = capsys.readouterr().err
        assert "host_event" not in output
        assert "sdk_event" in output

    def test_repeated_setup_replaces_handlers(self):
        """Test that configuring twice does not duplicate handlers."""
        setup_logging(LoggingConfig())
        setup_logging(LoggingConfig())

        assert len(logging.getLogger(SDK_LOGGER_NAME).handlers) == 1

    def test_no_handlers_propagates(self):
        """Test that SDK records go to the host setup when no handlers are enabled."""
        setup_logging(LoggingConfig(handlers=[]))

        sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
        assert sdk_logger.handlers == []
        assert sdk_logger.propagate is True


class TestContext:
    """Test suite for bound context variables."""

    def test_bind_and_clear_context(self, capsys):
        """Test that bound context appears on events until cleared."""
        setup_logging(LoggingConfig(level="INFO", format="json"))
        logger = get_logger("discogs_sdk.test")

        bind_context(username="rodneyfool")
        logger.info("collection_sync_started")
        clear_context()
        logger.info("collection_sync_finished")

        lines = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
        started = next(e for e in lines if e["event"] == "collection_sync_started")
        finished = next(e for e in lines if e["event"] == "collection_sync_finished")
        assert started["username"] == "rodneyfool"
        assert "username" not in finished


class TestRedaction:
    """Test suite for credential masking."""

    def test_sensitive_keys_masked(self):
        """Test that credential fields are replaced."""
        event = redact_secrets(
            None,
            "info",
            {"event": "discogs_oauth", "token": "abc", "oauth_token_secret": "s", "username": "u"},
        )
        assert event["token"] == REDACTED
        assert event["oauth_token_secret"] == REDACTED
        assert event["username"] == "u"

    def test_header_mapping_masked(self):
        """Test that Authorization inside a headers mapping is replaced."""
        event = redact_secrets(
            None,
            "debug",
            {
                "event": "http_request",
                "headers": {"Authorization": "Discogs token=abc", "Accept": "x"},
            },
        )
        assert event["headers"] == {"Authorization": REDACTED, "Accept": "x"}

    def test_empty_values_kept(self):
        """Test that unset credentials are left as they are."""
        assert redact_secrets(None, "info", {"event": "e", "token": None})["token"] is None

    def test_rendered_output_masked(self, capsys):
        """Test that secrets never reach the rendered output."""
        setup_logging(LoggingConfig(level="INFO", format="json"))

        get_logger("discogs_sdk.test").info("discogs_auth", authorization="Discogs token=abc123")

        output = capsys.readouterr().err
        assert "abc123" not in output
        assert json.loads(output.strip().splitlines()[-1])["authorization"] == REDACTED
