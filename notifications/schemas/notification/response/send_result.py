"""Result of a send operation."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel
from notifications.schemas.notification.response.notification_record import (
    NotificationRecord,
)


class SendResult(BaseSchemaModel):
    """Outcome of fan-out.

    A broadcast returns the single created record. A targeted send returns
    only the number of records created.
    """

    record: NotificationRecord | None = None
    created_count: int = Field(..., ge=1)

    @property
    def is_broadcast(self) -> bool:
        """Whether the send produced a single broadcast record."""
        return self.record is not None
