"""Notification response schemas."""

from notifications.schemas.notification.response.inbox_response import (
    InboxResponse,
)
from notifications.schemas.notification.response.notification_record import (
    NotificationRecord,
    RecipientInfo,
    SenderInfo,
)
from notifications.schemas.notification.response.send_result import SendResult
from notifications.schemas.notification.response.sent_history import (
    SenderDisplay,
    SentHistoryEntry,
    SentHistoryResponse,
)

__all__ = [
    "InboxResponse",
    "NotificationRecord",
    "RecipientInfo",
    "SendResult",
    "SenderDisplay",
    "SenderInfo",
    "SentHistoryEntry",
    "SentHistoryResponse",
]
