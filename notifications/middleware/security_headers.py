"""Security headers middleware."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse
from django.utils.cache import patch_cache_control, patch_vary_headers

from notifications.constants import API_PATH_PREFIX, SECURITY_HEADERS


class SecurityHeadersMiddleware:
    """Harden responses of the JSON API.

    Every response gets SECURITY_HEADERS, which deny framing and all content
    loading. Inboxes and sent histories are private to the token holder, so
    API responses are also marked ``no-store`` and vary on the credentials.
    Health probe responses are left unmarked.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)

        for header, value in SECURITY_HEADERS.items():
            response.setdefault(header, value)

        if request.path.startswith(API_PATH_PREFIX):
            patch_cache_control(response, private=True, no_store=True)
            patch_vary_headers(response, ("Authorization", "Cookie"))

        return response
