"""Repositories for the notifications app."""

from notifications.repositories.notification_repository import (
    NotificationRepository,
    notification_repository,
    store_operation,
)

__all__ = ["NotificationRepository", "notification_repository", "store_operation"]
