"""Exceptions raised by the delivery engine and the record store."""

from typing import Any


class DeliveryError(Exception):
    """Base exception for notification delivery errors.

    Subclasses carry the HTTP status code and error code the exception
    handler renders them with.
    """

    status_code = 500
    error_code = "internal_error"

    def __init__(self, message: str):
        """Initialize delivery error.

        Args:
            message: Error message surfaced to the caller.
        """
        self.message = message
        super().__init__(message)


class InvalidRequestError(DeliveryError):
    """Missing or malformed request fields (400)."""

    status_code = 400
    error_code = "bad_request"

    def __init__(self, message: str, errors: list[Any] | None = None):
        """Initialize invalid request error.

        Args:
            message: Error message
            errors: Field-level validation errors, if any
        """
        self.errors = errors or []
        super().__init__(message)


class ForbiddenError(DeliveryError):
    """Messaging rule violation or non-owner mutation attempt (403).

    The message names the violated rule and is returned verbatim.
    """

    status_code = 403
    error_code = "forbidden"


class NotificationNotFoundError(DeliveryError):
    """Notification absent or not visible to the caller (404).

    Both cases share one generic message so that existence is not leaked.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(self, notification_id: str):
        """Initialize notification not found error.

        Args:
            notification_id: ID that was looked up (logged, not rendered)
        """
        self.notification_id = notification_id
        super().__init__("Notification not found.")


class StoreUnavailableError(DeliveryError):
    """Notification store timed out or lost its connection (503)."""

    status_code = 503
    error_code = "service_unavailable"

    def __init__(self, operation: str, message: str | None = None):
        """Initialize store unavailable error.

        Args:
            operation: Store operation that failed
            message: Optional custom error message
        """
        self.operation = operation
        super().__init__(
            message or "Notification store is temporarily unavailable."
        )
