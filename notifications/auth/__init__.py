"""Caller identity and authentication for the notifications app."""

from notifications.auth.caller import Caller
from notifications.auth.jwt_authentication import CallerAuthentication

__all__ = ["Caller", "CallerAuthentication"]
