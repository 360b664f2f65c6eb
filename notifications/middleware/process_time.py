"""Request timing middleware.

Every response reports its processing time in ``X-Process-Time``. Requests
slower than ``settings.SLOW_REQUEST_THRESHOLD_SECONDS`` are logged with the
route name and status, so a slow inbox query can be told apart from a slow
send. The stdlib log filter adds the request id and caller.
"""

import logging
import time
from collections.abc import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse

from notifications.constants import PROCESS_TIME_HEADER

logger = logging.getLogger(__name__)


class ProcessTimeMiddleware:
    """Add X-Process-Time to responses and warn about slow requests."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        started = time.perf_counter()
        response = self.get_response(request)
        elapsed = time.perf_counter() - started

        response[PROCESS_TIME_HEADER] = f"{elapsed:.6f}"

        threshold = settings.SLOW_REQUEST_THRESHOLD_SECONDS
        if elapsed > threshold:
            logger.warning(
                "Slow request: %s %s answered %s in %.2fs (threshold %.2fs)",
                request.method,
                self._route_name(request),
                response.status_code,
                elapsed,
                threshold,
            )

        return response

    @staticmethod
    def _route_name(request: HttpRequest) -> str:
        """Name the matched URL pattern, falling back to the raw path."""
        match = getattr(request, "resolver_match", None)
        if match is not None and match.view_name:
            return match.view_name
        return request.path
