"""Request ID middleware for log correlation."""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from notifications.constants import REQUEST_ID_HEADER
from notifications.logging.context import clear_request_context, set_request_id


class RequestIDMiddleware:
    """Tag every request with an X-Request-ID.

    Reuses the incoming header when the campus web client or a proxy sent
    one, otherwise generates a UUID. The id is stored in thread-local
    storage for the log processors, echoed on the response, and the whole
    log context (including any bound caller) is cleared when the request
    completes.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request and add request ID tracking."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        set_request_id(request_id)
        request.request_id = request_id  # type: ignore[attr-defined]

        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_request_context()
