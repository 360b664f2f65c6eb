"""Logging filters for enriching log records with request context."""

import logging

from notifications.logging.context import get_caller_fields, get_request_id


class RequestIDFilter(logging.Filter):
    """Add request id and caller to stdlib log records.

    Used by the plain console handler configured in Django settings, before
    structlog takes over in ``setup_logging``. Records outside a request
    get ``'N/A'``; unauthenticated requests get ``'-'`` as the user.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add request_id and user_id attributes to the log record."""
        record.request_id = get_request_id() or "N/A"
        record.user_id = get_caller_fields().get("user_id", "-")
        return True
