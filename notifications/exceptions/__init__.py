"""Exception handling utilities for the campus notification service."""

from notifications.exceptions.delivery_exceptions import (
    DeliveryError,
    ForbiddenError,
    InvalidRequestError,
    NotificationNotFoundError,
    StoreUnavailableError,
)
from notifications.exceptions.handlers import custom_exception_handler

__all__ = [
    "DeliveryError",
    "ForbiddenError",
    "InvalidRequestError",
    "NotificationNotFoundError",
    "StoreUnavailableError",
    "custom_exception_handler",
]
