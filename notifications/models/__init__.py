"""Database models for the notifications app."""

from notifications.models.notification import Notification
from notifications.models.read_receipt import NotificationReadReceipt

__all__ = ["Notification", "NotificationReadReceipt"]
