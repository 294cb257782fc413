"""Utility helper functions."""

from blogdash.utils.helpers import get_summary, host, response_datetime, today_str

__all__ = [
    "get_summary",
    "host",
    "response_datetime",
    "today_str",
]
