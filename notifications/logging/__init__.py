"""Logging utilities for the campus notification service."""

from notifications.logging.config import setup_logging
from notifications.logging.context import (
    bind_caller,
    clear_request_context,
    get_caller_fields,
    get_request_id,
    set_request_id,
)
from notifications.logging.filters import RequestIDFilter

__all__ = [
    "RequestIDFilter",
    "bind_caller",
    "clear_request_context",
    "get_caller_fields",
    "get_request_id",
    "set_request_id",
    "setup_logging",
]
