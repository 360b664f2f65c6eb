"""Session token authentication for Django REST Framework.

The campus application issues HS256 session tokens carrying the user id and
role. They arrive either as a Bearer token or in the ``token`` cookie set by
the login flow.
"""

from django.conf import settings

import jwt
import structlog
from rest_framework import authentication, exceptions

from notifications.auth.caller import Caller
from notifications.logging.context import bind_caller

logger = structlog.get_logger(__name__)


class CallerAuthentication(authentication.BaseAuthentication):
    """Authenticate requests into an explicit :class:`Caller`."""

    www_authenticate_realm = "api"

    def authenticate(self, request):
        """Authenticate the request using the session token.

        Args:
            request: DRF request object

        Returns:
            Tuple of (Caller, token) or None if no token was supplied

        Raises:
            AuthenticationFailed: If the token is invalid, expired or
                carries no usable identity
        """
        token = self._get_token(request)
        if token is None:
            return None

        try:
            claims = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=[settings.JWT_ALGORITHM],
            )
        except jwt.ExpiredSignatureError as err:
            logger.info("Session token expired")
            raise exceptions.AuthenticationFailed("Session expired") from err
        except jwt.InvalidTokenError as err:
            logger.warning("Invalid session token", error=str(err))
            raise exceptions.AuthenticationFailed("Invalid token") from err

        try:
            caller = Caller.from_claims(claims)
        except ValueError as err:
            logger.warning("Session token has unusable claims", error=str(err))
            raise exceptions.AuthenticationFailed(str(err)) from err

        bind_caller(caller.id, caller.role.value)
        return (caller, token)

    def authenticate_header(self, request):
        """Return the WWW-Authenticate header so DRF answers 401."""
        return f'Bearer realm="{self.www_authenticate_realm}"'

    def _get_token(self, request) -> str | None:
        """Extract the token from the Authorization header or cookie.

        Raises:
            AuthenticationFailed: If the Authorization header is malformed
        """
        auth_header = request.headers.get("authorization")
        if auth_header:
            parts = auth_header.split()
            if len(parts) != 2 or parts[0].lower() != "bearer":
                raise exceptions.AuthenticationFailed(
                    "Invalid authorization header format"
                )
            return parts[1]

        return request.COOKIES.get(settings.AUTH_COOKIE_NAME) or None
