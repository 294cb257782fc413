"""
Logging and request correlation for Blogdash Backend.

Usage
-----
>>> from blogdash.monitoring import configure_logging, get_logger
>>> configure_logging()
>>> get_logger(__name__).info("ready")
"""

from blogdash.monitoring.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    redact_pii,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "redact_pii",
    "sanitize_headers",
    "sanitize_log_message",
]
