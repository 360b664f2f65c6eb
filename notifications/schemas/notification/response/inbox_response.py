"""Schema for a role inbox listing."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel
from notifications.schemas.notification.response.notification_record import (
    NotificationRecord,
)


class InboxResponse(BaseSchemaModel):
    """Inbox listing, newest first, with the reader's unread count."""

    success: bool = True
    unread: int = Field(..., ge=0, description="Records unread by the caller")
    data: list[NotificationRecord]
