"""Notification request schemas."""

from notifications.schemas.notification.request.mark_all_read_request import (
    MarkAllReadRequest,
)
from notifications.schemas.notification.request.send_notification_request import (
    RecipientSpec,
    SendNotificationRequest,
)

__all__ = ["MarkAllReadRequest", "RecipientSpec", "SendNotificationRequest"]
