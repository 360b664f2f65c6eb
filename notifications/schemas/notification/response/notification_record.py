"""Schema for a notification as seen by one reader."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from notifications.enums import Role, Severity
from notifications.schemas.base_schema_model import BaseSchemaModel


class SenderInfo(BaseSchemaModel):
    """Cached sender identity."""

    id: str
    role: Role
    name: str


class RecipientInfo(BaseSchemaModel):
    """Recipient role and key (a user id or BROADCAST)."""

    role: Role
    user_id: str


class NotificationRecord(BaseSchemaModel):
    """A notification rendered for one reader.

    ``is_read`` and ``read_at`` are the reader's own read state, which for a
    broadcast comes from the reader's receipt rather than the shared record.
    """

    id: UUID = Field(..., description="Unique notification identifier")
    title: str
    message: str
    severity: Severity = Field(..., alias="type")
    sender: SenderInfo
    recipient: RecipientInfo
    is_read: bool
    read_at: datetime | None = None
    action_link: str | None = None
    metadata: dict[str, Any] | None = None
    created_at: datetime
