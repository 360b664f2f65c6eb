"""Middleware components for the campus notification service."""

from notifications.middleware.process_time import ProcessTimeMiddleware
from notifications.middleware.request_id import RequestIDMiddleware
from notifications.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "ProcessTimeMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
