"""Request schema for marking every visible notification as read."""

from typing import Any

from pydantic import field_validator

from notifications.enums import Role
from notifications.schemas.base_schema_model import BaseSchemaModel


class MarkAllReadRequest(BaseSchemaModel):
    """Request body for PUT /read-all.

    ``role`` is optional; when sent it must be the caller's own role.
    """

    role: Role | None = None

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, value: Any) -> Role | None:
        """Accept role names in any casing."""
        return Role.parse(value) if value else None
