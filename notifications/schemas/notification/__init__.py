"""Notification schemas."""

from notifications.schemas.notification.request import (
    MarkAllReadRequest,
    RecipientSpec,
    SendNotificationRequest,
)
from notifications.schemas.notification.response import (
    InboxResponse,
    NotificationRecord,
    RecipientInfo,
    SendResult,
    SenderDisplay,
    SenderInfo,
    SentHistoryEntry,
    SentHistoryResponse,
)

__all__ = [
    "InboxResponse",
    "MarkAllReadRequest",
    "NotificationRecord",
    "RecipientInfo",
    "RecipientSpec",
    "SendNotificationRequest",
    "SendResult",
    "SenderDisplay",
    "SenderInfo",
    "SentHistoryEntry",
    "SentHistoryResponse",
]
