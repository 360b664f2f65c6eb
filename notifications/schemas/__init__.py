"""Schemas for the notifications app."""

from notifications.schemas.base_schema_model import BaseSchemaModel, parse_request
from notifications.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from notifications.schemas.notification import (
    InboxResponse,
    MarkAllReadRequest,
    NotificationRecord,
    SendNotificationRequest,
    SendResult,
    SentHistoryEntry,
    SentHistoryResponse,
)

__all__ = [
    "BaseSchemaModel",
    "DependencyHealth",
    "InboxResponse",
    "LivenessResponse",
    "MarkAllReadRequest",
    "NotificationRecord",
    "ReadinessResponse",
    "SendNotificationRequest",
    "SendResult",
    "SentHistoryEntry",
    "SentHistoryResponse",
    "parse_request",
]
