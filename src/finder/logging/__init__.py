"""Structured logging utilities."""

from .events import (
    JsonlEventLogger,
    SearchEvent,
    new_session_id,
    sanitize_options,
    utc_timestamp,
)

__all__ = [
    "JsonlEventLogger",
    "SearchEvent",
    "new_session_id",
    "sanitize_options",
    "utc_timestamp",
]
