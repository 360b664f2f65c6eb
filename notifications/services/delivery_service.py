"""Delivery engine for role-scoped campus notifications.

This module provides the DeliveryService class, which validates send requests
against the messaging matrix, fans them out into notification records, and
answers inbox, sent-history, read-state and deletion requests on behalf of an
explicit Caller.
"""

from uuid import UUID

from django.db.models import Q
from django.utils import timezone

import structlog

from notifications.auth.caller import Caller
from notifications.constants import BROADCAST
from notifications.enums import Role
from notifications.exceptions.delivery_exceptions import (
    ForbiddenError,
    NotificationNotFoundError,
)
from notifications.models import Notification
from notifications.repositories import NotificationRepository, notification_repository
from notifications.schemas.notification import (
    InboxResponse,
    NotificationRecord,
    RecipientInfo,
    SendNotificationRequest,
    SendResult,
    SenderDisplay,
    SenderInfo,
    SentHistoryEntry,
    SentHistoryResponse,
)
from notifications.services.authorization import check_send_allowed

logger = structlog.get_logger(__name__)


def inbox_filter(caller: Caller) -> Q:
    """Records addressed to the caller directly or to the caller's role."""
    return Q(recipient_role=caller.role.value) & (
        Q(recipient_key=caller.id) | Q(recipient_key=BROADCAST)
    )


def readable_filter(caller: Caller) -> Q:
    """Records the caller may mark as read.

    Everything in the caller's inbox, plus, for admins, anything addressed
    to the Admin role.
    """
    criteria = inbox_filter(caller)
    if caller.role is Role.ADMIN:
        criteria |= Q(recipient_role=Role.ADMIN.value)
    return criteria


class DeliveryService:
    """Authorization-gated fan-out and delivery of notifications.

    Every operation takes the acting Caller explicitly. The service never
    reads request or thread-local state.
    """

    def __init__(self, repository: NotificationRepository | None = None) -> None:
        """Initialize delivery service.

        Args:
            repository: Record store to use (default: module singleton).
        """
        self.repository = repository or notification_repository

    def send(self, sender: Caller, request: SendNotificationRequest) -> SendResult:
        """Send a notification to a role, either broadcast or targeted.

        Args:
            sender: Caller sending the notification.
            request: Validated send request.

        Returns:
            SendResult holding the broadcast record, or the number of
            targeted records created.

        Raises:
            ForbiddenError: If the messaging matrix forbids this send.
            StoreUnavailableError: If the store cannot be reached.
        """
        recipient = request.recipient
        broadcast = recipient.is_broadcast

        try:
            check_send_allowed(sender.role, recipient.role, broadcast)
        except ForbiddenError as err:
            logger.warning(
                "notification_send_forbidden",
                sender_id=sender.id,
                sender_role=sender.role.value,
                target_role=recipient.role.value,
                broadcast=broadcast,
                rule=err.message,
            )
            raise

        common_fields = {
            "title": request.title,
            "message": request.message,
            "severity": request.severity.value,
            "sender_id": sender.id,
            "sender_role": sender.role.value,
            "sender_name": sender.name,
            "recipient_role": recipient.role.value,
            "action_link": request.action_link,
            "metadata": request.metadata,
        }

        if broadcast:
            notification = self.repository.insert_one(
                recipient_key=BROADCAST, **common_fields
            )
            logger.info(
                "broadcast_notification_created",
                notification_id=str(notification.notification_id),
                sender_id=sender.id,
                sender_role=sender.role.value,
                recipient_role=recipient.role.value,
            )
            return SendResult(
                record=self._render(notification),
                created_count=1,
            )

        notifications = self.repository.insert_many(
            [
                Notification(recipient_key=user_id, **common_fields)
                for user_id in recipient.target_ids
            ]
        )
        logger.info(
            "targeted_notifications_created",
            sender_id=sender.id,
            sender_role=sender.role.value,
            recipient_role=recipient.role.value,
            count=len(notifications),
        )
        return SendResult(created_count=len(notifications))

    def get_inbox(self, caller: Caller) -> InboxResponse:
        """List notifications visible to the caller, newest first.

        Returns:
            InboxResponse with each record rendered with the caller's own
            read state, and the caller's unread count.
        """
        notifications = self.repository.find_many(
            inbox_filter(caller), reader_id=caller.id
        )
        records = [self._render(n) for n in notifications]
        unread = sum(1 for record in records if not record.is_read)

        logger.info(
            "inbox_queried",
            user_id=caller.id,
            role=caller.role.value,
            total=len(records),
            unread=unread,
        )
        return InboxResponse(unread=unread, data=records)

    def get_sent_history(self, caller: Caller) -> SentHistoryResponse:
        """List notifications the caller sent in their current role.

        Returns:
            SentHistoryResponse with entries reshaped for display.
        """
        notifications = self.repository.find_many(
            Q(sender_id=caller.id, sender_role=caller.role.value)
        )
        read_counts = self.repository.count_receipts(
            [n.notification_id for n in notifications if n.is_broadcast]
        )

        entries = [
            SentHistoryEntry(
                id=n.notification_id,
                when=n.created_at,
                severity=n.severity,
                title=n.title,
                message=n.message,
                by_whom=SenderDisplay(name=n.sender_name, role=n.sender_role),
                sender_id=n.sender_id,
                to_whom=RecipientInfo(role=n.recipient_role, user_id=n.recipient_key),
                status="Read" if n.is_read else "Unread",
                read_count=read_counts.get(n.notification_id, 0),
            )
            for n in notifications
        ]

        logger.info(
            "sent_history_queried",
            user_id=caller.id,
            role=caller.role.value,
            total=len(entries),
        )
        return SentHistoryResponse(data=entries)

    def mark_as_read(self, caller: Caller, notification_id: str) -> NotificationRecord:
        """Mark one visible notification as read for the caller.

        A record addressed to the caller by id is marked on the record
        itself. Any other visible record (a broadcast) gets a receipt for
        the caller, and the record is flagged as acknowledged the first
        time anyone reads it. Repeated calls keep the first read time.

        Args:
            caller: Caller reading the notification.
            notification_id: ID of the notification.

        Returns:
            The notification rendered with the caller's read state.

        Raises:
            NotificationNotFoundError: If the id is malformed, absent, or not
                visible to the caller.
        """
        record_id = self._parse_id(notification_id, caller)
        notification = self.repository.find_one(
            Q(notification_id=record_id) & readable_filter(caller)
        )
        if notification is None:
            logger.warning(
                "notification_not_found",
                notification_id=notification_id,
                user_id=caller.id,
                role=caller.role.value,
            )
            raise NotificationNotFoundError(notification_id)

        now = timezone.now()
        unread_record = Q(notification_id=record_id, is_read=False)
        if notification.recipient_key != caller.id:
            self.repository.add_receipt(record_id, caller.id, caller.role, now)
        self.repository.update_many(unread_record, is_read=True, read_at=now)

        logger.info(
            "notification_marked_as_read",
            notification_id=notification_id,
            user_id=caller.id,
            broadcast=notification.is_broadcast,
        )

        refreshed = self.repository.find_many(
            Q(notification_id=record_id), reader_id=caller.id
        )
        if not refreshed:
            # Deleted by its sender between the read and the refresh
            raise NotificationNotFoundError(notification_id)
        return self._render(refreshed[0])

    def mark_all_as_read(self, caller: Caller) -> int:
        """Mark every notification in the caller's inbox as read for them.

        Returns:
            Number of notifications that were unread for the caller.
        """
        now = timezone.now()

        direct_count = self.repository.update_many(
            Q(
                recipient_role=caller.role.value,
                recipient_key=caller.id,
                is_read=False,
            ),
            is_read=True,
            read_at=now,
        )

        broadcasts = self.repository.find_many(
            Q(recipient_role=caller.role.value, recipient_key=BROADCAST),
            reader_id=caller.id,
        )
        unread_ids = [n.notification_id for n in broadcasts if n.reader_read_at is None]
        self.repository.add_receipts(unread_ids, caller.id, caller.role, now)
        if unread_ids:
            self.repository.update_many(
                Q(notification_id__in=unread_ids, is_read=False),
                is_read=True,
                read_at=now,
            )

        count = direct_count + len(unread_ids)
        logger.info(
            "all_notifications_marked_as_read",
            user_id=caller.id,
            role=caller.role.value,
            count=count,
        )
        return count

    def delete(self, caller: Caller, notification_id: str) -> None:
        """Permanently delete a notification the caller sent.

        Admins may delete any notification.

        Raises:
            NotificationNotFoundError: If the id is malformed or absent.
            ForbiddenError: If the caller is neither the sender nor an admin.
        """
        record_id = self._parse_id(notification_id, caller)
        notification = self.repository.find_by_id(record_id)
        if notification is None:
            logger.warning(
                "notification_not_found_for_deletion",
                notification_id=notification_id,
                user_id=caller.id,
            )
            raise NotificationNotFoundError(notification_id)

        is_owner = notification.sender_id == caller.id
        if not is_owner and caller.role is not Role.ADMIN:
            logger.warning(
                "unauthorized_notification_deletion",
                notification_id=notification_id,
                user_id=caller.id,
                owner_id=notification.sender_id,
            )
            raise ForbiddenError(
                "Access Denied: You can only delete notifications you created."
            )

        self.repository.delete_by_id(record_id)
        logger.info(
            "notification_deleted",
            notification_id=notification_id,
            user_id=caller.id,
            admin_override=not is_owner,
        )

    def _parse_id(self, notification_id: str, caller: Caller) -> UUID:
        """Parse a notification id, treating malformed ids as not found."""
        try:
            return UUID(str(notification_id))
        except ValueError as err:
            logger.warning(
                "invalid_notification_id",
                notification_id=notification_id,
                user_id=caller.id,
            )
            raise NotificationNotFoundError(notification_id) from err

    def _render(self, notification: Notification) -> NotificationRecord:
        """Render a notification with the reader's own read state.

        Broadcast read state comes from the reader's receipt, annotated by
        the repository as ``reader_read_at``. A freshly created record has
        no annotation and is unread.
        """
        if notification.is_broadcast:
            read_at = getattr(notification, "reader_read_at", None)
            is_read = read_at is not None
        else:
            read_at = notification.read_at
            is_read = notification.is_read

        return NotificationRecord(
            id=notification.notification_id,
            title=notification.title,
            message=notification.message,
            severity=notification.severity,
            sender=SenderInfo(
                id=notification.sender_id,
                role=notification.sender_role,
                name=notification.sender_name,
            ),
            recipient=RecipientInfo(
                role=notification.recipient_role,
                user_id=notification.recipient_key,
            ),
            is_read=is_read,
            read_at=read_at,
            action_link=notification.action_link,
            metadata=notification.metadata,
            created_at=notification.created_at,
        )


# Singleton instance for use throughout the application
delivery_service = DeliveryService()
