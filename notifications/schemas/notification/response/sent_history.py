"""Schemas for the sender's "Sent" view."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from notifications.enums import Role, Severity
from notifications.schemas.base_schema_model import BaseSchemaModel
from notifications.schemas.notification.response.notification_record import (
    RecipientInfo,
)


class SenderDisplay(BaseSchemaModel):
    """Sender as shown in the history list."""

    name: str
    role: Role


class SentHistoryEntry(BaseSchemaModel):
    """One sent notification reshaped for display.

    ``to_whom.user_id`` is the literal BROADCAST for broadcasts so clients
    can render "ALL <ROLE>".
    """

    id: UUID
    when: datetime
    severity: Severity = Field(..., alias="type")
    title: str
    message: str
    by_whom: SenderDisplay
    sender_id: str
    to_whom: RecipientInfo
    status: Literal["Read", "Unread"]
    read_count: int = Field(
        0, ge=0, description="Readers who acknowledged (broadcasts only)"
    )


class SentHistoryResponse(BaseSchemaModel):
    """Sent history listing, newest first."""

    success: bool = True
    data: list[SentHistoryEntry]
