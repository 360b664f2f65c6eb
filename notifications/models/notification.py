"""Notification model for role-addressed campus alerts.

A notification is addressed to a recipient role and either one concrete
user id or the ``BROADCAST`` sentinel. Broadcast visibility is resolved at
read time, so a broadcast is stored exactly once no matter how many users
hold the recipient role.
"""

import uuid
from typing import ClassVar

from django.db import models

from notifications.constants import (
    BROADCAST,
    MAX_SENDER_NAME_LENGTH,
    MAX_USER_ID_LENGTH,
)
from notifications.enums import Role, Severity

ROLE_CHOICES = [(role.value, role.value) for role in Role]
SEVERITY_CHOICES = [(severity.value, severity.value) for severity in Severity]


class Notification(models.Model):
    """A single persisted notification record.

    Sender fields are cached at creation and never updated. The only
    mutable fields are ``is_read`` and ``read_at``.

    For a targeted record the read fields are the recipient's read state.
    For a broadcast record they mean "acknowledged by at least one
    recipient"; per-reader state lives in NotificationReadReceipt.

    Attributes:
        notification_id: Unique identifier for the notification.
        title: Short headline of the alert.
        message: Body of the alert.
        severity: Info, Warning or Success.
        sender_id: Opaque id of the sending user.
        sender_role: Role the sender acted as.
        sender_name: Cached display name of the sender.
        recipient_role: Role class the record is addressed to.
        recipient_key: Concrete user id, or BROADCAST.
        is_read: Read flag (see above for broadcast semantics).
        read_at: When the record was first read.
        action_link: Optional opaque link carried through unchanged.
        metadata: Optional opaque payload carried through unchanged.
        created_at: When the notification was created.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    title = models.CharField(max_length=255)
    message = models.TextField()
    severity = models.CharField(
        max_length=10,
        choices=SEVERITY_CHOICES,
        default=Severity.INFO.value,
    )
    sender_id = models.CharField(
        max_length=MAX_USER_ID_LENGTH,
        help_text="Opaque id of the sending user",
    )
    sender_role = models.CharField(max_length=10, choices=ROLE_CHOICES)
    sender_name = models.CharField(
        max_length=MAX_SENDER_NAME_LENGTH, blank=True, default=""
    )
    recipient_role = models.CharField(max_length=10, choices=ROLE_CHOICES)
    recipient_key = models.CharField(
        max_length=MAX_USER_ID_LENGTH,
        help_text="Recipient user id, or BROADCAST for every user of the role",
    )
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    action_link = models.CharField(max_length=500, null=True, blank=True)
    metadata = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(
                fields=["recipient_role", "recipient_key", "is_read"],
                name="notif_recipient_read_idx",
            ),
            models.Index(fields=["sender_id"], name="notif_sender_idx"),
            models.Index(fields=["-created_at"], name="notif_created_idx"),
        ]

    @property
    def is_broadcast(self) -> bool:
        """Whether the record is addressed to every user of its role."""
        return self.recipient_key == BROADCAST

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.title} -> {self.recipient_role}:{self.recipient_key}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"sender={self.sender_role}:{self.sender_id}, "
            f"recipient={self.recipient_role}:{self.recipient_key}, "
            f"is_read={self.is_read})>"
        )
