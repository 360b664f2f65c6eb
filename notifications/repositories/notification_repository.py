"""Repository for notification persistence.

This is the only code that touches the ORM for notifications. It holds no
business rules: callers pass filters and patches, the repository executes
them and translates database failures into StoreUnavailableError.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any
from uuid import UUID

from django.db import DatabaseError, transaction
from django.db.models import Count, OuterRef, Q, Subquery

import structlog

from notifications.enums import Role
from notifications.exceptions.delivery_exceptions import StoreUnavailableError
from notifications.models import Notification, NotificationReadReceipt

logger = structlog.get_logger(__name__)


@contextmanager
def store_operation(operation: str) -> Iterator[None]:
    """Translate database failures inside the block into StoreUnavailableError.

    Args:
        operation: Name of the store operation, for logs and the error.

    Raises:
        StoreUnavailableError: If the database raised any DatabaseError,
            including timeouts and dropped connections.
    """
    try:
        yield
    except DatabaseError as err:
        logger.error(
            "notification_store_unavailable",
            operation=operation,
            error=str(err),
        )
        raise StoreUnavailableError(operation) from err


class NotificationRepository:
    """Persistence and indexed lookup for notifications and read receipts."""

    def insert_one(self, **fields: Any) -> Notification:
        """Create a single notification.

        Args:
            **fields: Notification model field values.

        Returns:
            The created Notification.
        """
        with store_operation("insert_one"):
            return Notification.objects.create(**fields)

    def insert_many(self, notifications: list[Notification]) -> list[Notification]:
        """Create several notifications in one all-or-nothing write.

        Args:
            notifications: Unsaved Notification instances.

        Returns:
            The created notifications.
        """
        with store_operation("insert_many"), transaction.atomic():
            return Notification.objects.bulk_create(notifications)

    def find_by_id(self, notification_id: UUID) -> Notification | None:
        """Look up a notification by primary key."""
        return self.find_one(Q(notification_id=notification_id))

    def find_one(self, criteria: Q) -> Notification | None:
        """Return the first notification matching criteria, if any."""
        with store_operation("find_one"):
            return Notification.objects.filter(criteria).first()

    def find_many(
        self,
        criteria: Q,
        reader_id: str | None = None,
    ) -> list[Notification]:
        """Return notifications matching criteria, newest first.

        Args:
            criteria: Filter to apply.
            reader_id: When given, each result is annotated with
                ``reader_read_at``, the reader's receipt timestamp or None.

        Returns:
            Matching notifications ordered by created_at descending.
        """
        with store_operation("find_many"):
            queryset = Notification.objects.filter(criteria)
            if reader_id is not None:
                receipts = NotificationReadReceipt.objects.filter(
                    notification=OuterRef("pk"),
                    reader_id=reader_id,
                )
                queryset = queryset.annotate(
                    reader_read_at=Subquery(receipts.values("read_at")[:1])
                )
            return list(queryset.order_by("-created_at"))

    def count_receipts(self, notification_ids: list[UUID]) -> dict[UUID, int]:
        """Count read receipts per notification.

        Returns:
            Mapping of notification id to receipt count; ids without
            receipts are absent.
        """
        if not notification_ids:
            return {}
        with store_operation("count_receipts"):
            rows = (
                NotificationReadReceipt.objects.filter(
                    notification_id__in=notification_ids
                )
                .values("notification_id")
                .annotate(readers=Count("id"))
            )
            return {row["notification_id"]: row["readers"] for row in rows}

    def update_by_id(self, notification_id: UUID, **patch: Any) -> int:
        """Apply a field patch to one notification.

        Returns:
            Number of rows updated (0 or 1).
        """
        return self.update_many(Q(notification_id=notification_id), **patch)

    def update_many(self, criteria: Q, **patch: Any) -> int:
        """Apply a field patch to every notification matching criteria.

        Returns:
            Number of rows updated.
        """
        with store_operation("update_many"):
            return Notification.objects.filter(criteria).update(**patch)

    def delete_by_id(self, notification_id: UUID) -> int:
        """Permanently remove a notification and its receipts.

        Returns:
            Number of notifications deleted (0 or 1).
        """
        with store_operation("delete_by_id"):
            _deleted, per_model = Notification.objects.filter(
                notification_id=notification_id
            ).delete()
        return per_model.get(Notification._meta.label, 0)

    def add_receipt(
        self,
        notification_id: UUID,
        reader_id: str,
        reader_role: Role,
        read_at: datetime,
    ) -> tuple[NotificationReadReceipt, bool]:
        """Record that a reader read a notification.

        Existing receipts are left untouched, so the first read time wins.

        Returns:
            Tuple of (receipt, created).
        """
        with store_operation("add_receipt"):
            return NotificationReadReceipt.objects.get_or_create(
                notification_id=notification_id,
                reader_id=reader_id,
                defaults={"reader_role": reader_role.value, "read_at": read_at},
            )

    def add_receipts(
        self,
        notification_ids: list[UUID],
        reader_id: str,
        reader_role: Role,
        read_at: datetime,
    ) -> None:
        """Record that a reader read several notifications.

        Receipts that already exist are skipped.
        """
        if not notification_ids:
            return
        receipts = [
            NotificationReadReceipt(
                notification_id=notification_id,
                reader_id=reader_id,
                reader_role=reader_role.value,
                read_at=read_at,
            )
            for notification_id in notification_ids
        ]
        with store_operation("add_receipts"):
            NotificationReadReceipt.objects.bulk_create(
                receipts, ignore_conflicts=True
            )


# Singleton instance for use throughout the application
notification_repository = NotificationRepository()
