"""API views for the notifications app."""

import structlog
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from notifications.auth import Caller, CallerAuthentication
from notifications.enums import Role
from notifications.exceptions import ForbiddenError, InvalidRequestError
from notifications.schemas import (
    MarkAllReadRequest,
    SendNotificationRequest,
    parse_request,
)
from notifications.services import health_service
from notifications.services.delivery_service import delivery_service

logger = structlog.get_logger(__name__)


def require_role(caller: Caller, role: Role) -> None:
    """Reject callers whose role differs from a role-scoped endpoint's role.

    Raises:
        ForbiddenError: If the caller does not hold the role.
    """
    if caller.role is not role:
        logger.warning(
            "role_scoped_endpoint_denied",
            user_id=caller.id,
            caller_role=caller.role.value,
            required_role=role.value,
        )
        raise ForbiddenError(f"Access Denied: {role.value} only")


class LivenessCheckView(APIView):
    """Liveness probe endpoint.

    Returns 200 if the service is alive. Exempt from authentication.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check."""
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(mode="json"), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint.

    Returns 200 with a degraded status when the database is unavailable.
    Exempt from authentication.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        return Response(
            readiness.model_dump(mode="json", by_alias=True),
            status=status.HTTP_200_OK,
        )


class SendNotificationView(APIView):
    """API endpoint for sending a notification.

    The caller's role decides which recipients are permitted; see
    ``notifications.services.authorization``.
    """

    authentication_classes = (CallerAuthentication,)
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        """Send a broadcast or targeted notification.

        Args:
            request: HTTP request with body
                ``{title, message, type?, recipient: {role, userIds}}``.
                ``userIds == ["BROADCAST"]`` addresses every user of the role.

        Returns:
            201 Created with the broadcast record, or the number of
                targeted notifications created
            400 Bad Request if required fields are missing or malformed
            401 Unauthorized if authentication fails
            403 Forbidden if the messaging rules forbid this send
            503 Service Unavailable if the store cannot be reached
        """
        caller: Caller = request.user
        logger.info(
            "Send notification request received",
            user_id=caller.id,
            role=caller.role.value,
        )

        send_request = parse_request(SendNotificationRequest, request.data)
        result = delivery_service.send(caller, send_request)

        if result.is_broadcast:
            body = {
                "success": True,
                "data": result.record.model_dump(mode="json", by_alias=True),
            }
        else:
            body = {
                "success": True,
                "message": (
                    f"Alerts sent successfully to {result.created_count} recipients."
                ),
                "count": result.created_count,
            }
        return Response(body, status=status.HTTP_201_CREATED)


class RoleInboxView(APIView):
    """API endpoint for one role's inbox.

    Mounted once per role; the caller must hold that role.
    """

    authentication_classes = (CallerAuthentication,)
    permission_classes = (IsAuthenticated,)
    role: Role | None = None

    def get(self, request):
        """Return the caller's direct and broadcast notifications.

        Returns:
            200 OK with ``{success, unread, data}``, newest first
            403 Forbidden if the caller does not hold the endpoint's role
        """
        caller: Caller = request.user
        require_role(caller, self.role)

        inbox = delivery_service.get_inbox(caller)
        return Response(
            inbox.model_dump(mode="json", by_alias=True),
            status=status.HTTP_200_OK,
        )


class RoleSentHistoryView(APIView):
    """API endpoint for the notifications a role's user has sent.

    Mounted once per role; the caller must hold that role.
    """

    authentication_classes = (CallerAuthentication,)
    permission_classes = (IsAuthenticated,)
    role: Role | None = None

    def get(self, request):
        """Return the caller's sent notifications reshaped for display."""
        caller: Caller = request.user
        require_role(caller, self.role)

        history = delivery_service.get_sent_history(caller)
        return Response(
            history.model_dump(mode="json", by_alias=True),
            status=status.HTTP_200_OK,
        )


class MarkReadView(APIView):
    """API endpoint for marking one notification as read."""

    authentication_classes = (CallerAuthentication,)
    permission_classes = (IsAuthenticated,)

    def put(self, request, notification_id):
        """Mark a notification visible to the caller as read.

        Returns:
            200 OK with the notification as the caller now sees it
            404 Not Found if the notification is absent or not visible
        """
        caller: Caller = request.user
        record = delivery_service.mark_as_read(caller, notification_id)
        return Response(
            {"success": True, "data": record.model_dump(mode="json", by_alias=True)},
            status=status.HTTP_200_OK,
        )


class MarkAllReadView(APIView):
    """API endpoint for marking the caller's whole inbox as read."""

    authentication_classes = (CallerAuthentication,)
    permission_classes = (IsAuthenticated,)

    def put(self, request):
        """Mark every notification in the caller's inbox as read.

        The optional body ``{role}`` must name the caller's own role.
        """
        caller: Caller = request.user
        mark_all_request = parse_request(MarkAllReadRequest, request.data or {})
        if mark_all_request.role is not None:
            require_role(caller, mark_all_request.role)

        count = delivery_service.mark_all_as_read(caller)
        return Response(
            {
                "success": True,
                "message": f"All {caller.role.value} notifications marked as read.",
                "count": count,
            },
            status=status.HTTP_200_OK,
        )


class NotificationDeleteView(APIView):
    """API endpoint for deleting a notification."""

    authentication_classes = (CallerAuthentication,)
    permission_classes = (IsAuthenticated,)

    def delete(self, request, notification_id):
        """Delete a notification the caller sent (admins: any notification).

        Query parameters ``userId`` and ``role`` are accepted from older
        clients; when present they must describe the authenticated caller.

        Returns:
            200 OK on success
            403 Forbidden if the caller is not the sender or an admin
            404 Not Found if the notification does not exist
        """
        caller: Caller = request.user
        self._check_query_identity(request, caller)

        delivery_service.delete(caller, notification_id)
        return Response(
            {"success": True, "message": "Deleted successfully"},
            status=status.HTTP_200_OK,
        )

    def _check_query_identity(self, request, caller: Caller) -> None:
        """Reject ``userId``/``role`` query parameters naming someone else."""
        user_id = request.query_params.get("userId")
        if user_id and user_id != caller.id:
            raise ForbiddenError("userId does not match the authenticated user.")

        role = request.query_params.get("role")
        if role:
            try:
                requested_role = Role.parse(role)
            except ValueError as err:
                raise InvalidRequestError(f"Unknown role: {role}") from err
            require_role(caller, requested_role)
