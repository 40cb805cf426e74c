"""Unit tests for structured logging configuration."""

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from src.catalog.builder import RequestBuilder
from src.fetch.redact import REDACTED_VALUE
from src.observability import configure_logging, get_logger
from src.observability.logging import redact_credentials


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self) -> None:
        """Test that events render as JSON lines."""
        output = io.StringIO()
        configure_logging(output=output)

        get_logger().info("catalog_ready", storefront="us")

        payload = json.loads(output.getvalue().strip())
        assert payload["event"] == "catalog_ready"
        assert payload["storefront"] == "us"
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_level_filtering(self) -> None:
        """Test that events below the configured level are dropped."""
        output = io.StringIO()
        configure_logging(level=logging.WARNING, output=output)

        get_logger().info("quiet")

        assert output.getvalue() == ""

    def test_console_output(self) -> None:
        """Test that the console renderer emits the event name."""
        output = io.StringIO()
        configure_logging(output=output, json_format=False)

        get_logger().warning("console_event")

        assert "console_event" in output.getvalue()

    def test_builder_logs_redacted_headers(self) -> None:
        """Test that request building never writes tokens to the log."""
        output = io.StringIO()
        configure_logging(level=logging.DEBUG, output=output)

        builder = RequestBuilder("us", "secret-dev-token")
        builder.build_search_request("hello world")

        text = output.getvalue()
        assert "request_built" in text
        assert "secret-dev-token" not in text
        assert "[REDACTED]" in text

    def test_credentials_redacted_in_output(self) -> None:
        """Test that tokens passed straight to a logger never render."""
        output = io.StringIO()
        configure_logging(output=output)

        get_logger(component="catalog").info(
            "token_refreshed",
            developer_token="secret-dev-token",
            headers={
                "Authorization": "Bearer secret-dev-token",
                "Music-User-Token": "secret-user-token",
                "Accept": "application/json",
            },
        )

        payload = json.loads(output.getvalue().strip())
        assert "secret" not in output.getvalue()
        assert payload["component"] == "catalog"
        assert payload["developer_token"] == REDACTED_VALUE
        assert payload["headers"]["Authorization"] == REDACTED_VALUE
        assert payload["headers"]["Music-User-Token"] == REDACTED_VALUE
        assert payload["headers"]["Accept"] == "application/json"


class TestRedactCredentials:
    """Tests for the redact_credentials processor."""

    @pytest.mark.parametrize(
        "key",
        [
            "developer_token",
            "user_token",
            "music_user_token",
            "Authorization",
            "Music-User-Token",
        ],
    )
    def test_credential_keys_replaced(self, key: str) -> None:
        """Test that credential-named event keys are replaced."""
        event = {"event": "x", key: "secret"}

        result = redact_credentials(None, "info", event)

        assert result[key] == REDACTED_VALUE
        assert result["event"] == "x"

    def test_header_mapping_redacted(self) -> None:
        """Test that header mappings keep non-sensitive values."""
        event = {
            "event": "x",
            "headers": {"Music-User-Token": "secret", "User-Agent": "ua"},
        }

        result = redact_credentials(None, "info", event)

        assert result["headers"] == {
            "Music-User-Token": REDACTED_VALUE,
            "User-Agent": "ua",
        }

    def test_plain_values_untouched(self) -> None:
        """Test that ordinary context passes through."""
        event = {"event": "x", "storefront": "us", "status_code": 200}

        result = redact_credentials(None, "info", event)

        assert result == {"event": "x", "storefront": "us", "status_code": 200}
