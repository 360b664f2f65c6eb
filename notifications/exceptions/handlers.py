"""Global exception handlers for the campus notification service."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from notifications.constants import REQUEST_ID_HEADER
from notifications.exceptions.delivery_exceptions import (
    DeliveryError,
    InvalidRequestError,
)
from notifications.logging.context import get_request_id

logger = logging.getLogger(__name__)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Handles DRF, Django and delivery exceptions, providing:
    - Standard response format for clients:
      {success, status, error, message, request_id, timestamp}
    - Detailed logging for troubleshooting: error type, path, stack trace

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else context.get("request")
    request_id = get_request_id()

    if isinstance(exc, DeliveryError):
        response_data = _create_error_response(
            status_code=exc.status_code,
            error=exc.error_code,
            message=exc.message,
            request_id=request_id,
        )
        if isinstance(exc, InvalidRequestError) and exc.errors:
            response_data["errors"] = exc.errors
        response = Response(response_data, status=exc.status_code)
    else:
        # Let DRF handle its own exceptions (and Http404/PermissionDenied)
        response = exception_handler(exc, context)

        if response is not None:
            detail = response.data.get("detail") if isinstance(
                response.data, dict
            ) else None
            response_data = _create_error_response(
                status_code=response.status_code,
                error=getattr(exc, "default_code", "error"),
                message=str(detail) if detail else _default_message(exc),
                request_id=request_id,
            )
            if detail is None:
                response_data["errors"] = response.data
            response.data = response_data
        else:
            # Unhandled exception - log as error and return 500
            response = Response(
                _create_error_response(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    error="internal_error",
                    message="An internal server error occurred.",
                    request_id=request_id,
                ),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    if request_id:
        response[REQUEST_ID_HEADER] = request_id

    _log_exception(exc, request, response)

    return response


def _default_message(exc: Exception) -> str:
    """Return the client-facing message for exceptions without a detail."""
    if isinstance(exc, Http404):
        return "The requested resource was not found."
    if isinstance(exc, PermissionDenied):
        return "You do not have permission to perform this action."
    return "Invalid request parameters."


def _create_error_response(
    status_code: int, error: str, message: str, request_id: str | None
) -> dict[str, Any]:
    """Create a standardized error response.

    Args:
        status_code: The HTTP status code.
        error: Machine-readable error code.
        message: The error message to return to the client.
        request_id: The request ID for tracing.

    Returns:
        Dictionary with standard error response format.
    """
    return {
        "success": False,
        "status": status_code,
        "error": error,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _log_exception(exc: Exception, request: Any, response: Response) -> None:
    """Log exception information for troubleshooting.

    Client errors (4xx) are logged as warnings, everything else as errors.
    In DEBUG mode, logs include stack traces.

    Args:
        exc: The exception that was raised.
        request: The HTTP request object.
        response: The response object.
    """
    status_code = response.status_code
    if 400 <= status_code < 500 and isinstance(
        exc, (DeliveryError, APIException, Http404, PermissionDenied)
    ):
        log_level = logging.WARNING
    else:
        log_level = logging.ERROR

    error_type = type(exc).__name__
    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {error_type}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

    logger.log(log_level, log_message)
