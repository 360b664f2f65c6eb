"""Per-reader acknowledgment of broadcast notifications."""

from typing import ClassVar

from django.db import models

from notifications.constants import MAX_USER_ID_LENGTH
from notifications.models.notification import ROLE_CHOICES


class NotificationReadReceipt(models.Model):
    """Records that one reader has read one broadcast notification.

    Receipts are removed together with their notification.
    """

    notification = models.ForeignKey(
        "notifications.Notification",
        on_delete=models.CASCADE,
        related_name="receipts",
        db_column="notification_id",
    )
    reader_id = models.CharField(max_length=MAX_USER_ID_LENGTH)
    reader_role = models.CharField(max_length=10, choices=ROLE_CHOICES)
    read_at = models.DateTimeField()

    class Meta:
        """Django model metadata."""

        db_table = "notification_read_receipts"
        unique_together: ClassVar[list[list[str]]] = [["notification", "reader_id"]]
        indexes: ClassVar[list] = [
            models.Index(fields=["reader_id"], name="receipt_reader_idx"),
        ]

    def __str__(self) -> str:
        """Return string representation of the receipt."""
        return f"{self.reader_role}:{self.reader_id} read {self.notification_id}"
