# tests/monitoring/test_logging.py
"""Tests for structured logging functionality."""

from structlog.contextvars import get_contextvars

from blogdash.monitoring import (
    bind_request_id,
    clear_context,
    redact_pii,
    sanitize_headers,
    sanitize_log_message,
)
from blogdash.monitoring.logging import sanitize_event_dict


class TestSanitizeLogMessage:
    def test_newlines_escaped(self) -> None:
        """Newlines should be escaped to prevent log injection."""
        result = sanitize_log_message("Line1\nLine2\rLine3")
        assert "\n" not in result
        assert "\r" not in result
        assert result == "Line1\\nLine2\\rLine3"

    def test_normal_message_unchanged(self) -> None:
        assert sanitize_log_message("Blog created") == "Blog created"


class TestSanitizeHeaders:
    def test_sensitive_headers_redacted(self) -> None:
        headers = {"Authorization": "Bearer secret", "X-API-Key": "k", "Accept": "json"}
        result = sanitize_headers(headers)
        assert result["Authorization"] == "[REDACTED]"
        assert result["X-API-Key"] == "[REDACTED]"
        assert result["Accept"] == "json"


class TestRedactPii:
    def test_email_redacted(self) -> None:
        assert redact_pii("User john@example.com created") == "User [REDACTED_EMAIL] created"

    def test_event_dict_sanitized(self) -> None:
        event = {"event": "signup jane@example.com\n", "headers": {"cookie": "a=b"}, "count": 3}
        result = sanitize_event_dict(None, "info", event)
        assert result["event"] == "signup [REDACTED_EMAIL]\\n"
        assert result["headers"] == {"cookie": "[REDACTED]"}
        assert result["count"] == 3


def test_request_id_context() -> None:
    clear_context()
    assert get_contextvars().get("request_id") is None
    bind_request_id("abc123")
    assert get_contextvars().get("request_id") == "abc123"
    clear_context()
    assert get_contextvars().get("request_id") is None
