"""Explicit caller identity passed into every delivery operation."""

from dataclasses import dataclass

from notifications.constants import (
    DEFAULT_ADMIN_NAME,
    MAX_SENDER_NAME_LENGTH,
    MAX_USER_ID_LENGTH,
)
from notifications.enums import Role


@dataclass(frozen=True)
class Caller:
    """Authenticated user on whose behalf an operation runs.

    The HTTP layer builds a Caller from verified session claims. The
    delivery engine trusts it completely and never inspects the request.

    Attributes:
        id: Opaque user id.
        role: Role the user acts as.
        name: Display name cached on notifications the caller sends.
    """

    id: str
    role: Role
    name: str = ""

    # DRF permission classes check request.user.is_authenticated
    is_authenticated = True

    @classmethod
    def from_claims(cls, claims: dict) -> "Caller":
        """Build a caller from decoded session token claims.

        Args:
            claims: JWT payload with ``id`` (or ``sub``), ``role`` and
                optionally ``name``.

        Returns:
            The Caller described by the claims.

        Raises:
            ValueError: If the id is missing or too long, the role is unknown,
                or the name is not a string or too long.
        """
        user_id = claims.get("id") or claims.get("sub")
        if not user_id:
            raise ValueError("Token carries no user id")
        user_id = str(user_id)
        if len(user_id) > MAX_USER_ID_LENGTH:
            raise ValueError(f"Token user id exceeds {MAX_USER_ID_LENGTH} characters")

        role = Role.parse(claims.get("role", ""))

        name = claims.get("name")
        if name is not None and not isinstance(name, str):
            raise ValueError("Token name must be a string")
        if name and len(name) > MAX_SENDER_NAME_LENGTH:
            raise ValueError(f"Token name exceeds {MAX_SENDER_NAME_LENGTH} characters")
        if not name:
            name = DEFAULT_ADMIN_NAME if role is Role.ADMIN else role.value
        return cls(id=user_id, role=role, name=name)

    def __str__(self) -> str:
        """String representation."""
        return f"Caller(id={self.id}, role={self.role.value})"
