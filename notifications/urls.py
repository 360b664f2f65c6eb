"""URL routing configuration for the notifications app."""

from django.urls import path

from notifications.enums import Role

from .views import (
    LivenessCheckView,
    MarkAllReadView,
    MarkReadView,
    NotificationDeleteView,
    ReadinessCheckView,
    RoleInboxView,
    RoleSentHistoryView,
    SendNotificationView,
)

health_urlpatterns = [
    path("live", LivenessCheckView.as_view(), name="health-live"),
    path("ready", ReadinessCheckView.as_view(), name="health-ready"),
]

role_urlpatterns = []
for role in Role:
    slug = role.value.lower()
    role_urlpatterns += [
        path(
            f"{slug}-inbox",
            RoleInboxView.as_view(role=role),
            name=f"{slug}-inbox",
        ),
        path(
            f"{slug}-history",
            RoleSentHistoryView.as_view(role=role),
            name=f"{slug}-history",
        ),
    ]

urlpatterns = [
    path("create", SendNotificationView.as_view(), name="notification-create"),
    *role_urlpatterns,
    path("read-all", MarkAllReadView.as_view(), name="notification-read-all"),
    path(
        "read/<str:notification_id>",
        MarkReadView.as_view(),
        name="notification-read",
    ),
    # Generic id route last so it never shadows the named routes above
    path(
        "<str:notification_id>",
        NotificationDeleteView.as_view(),
        name="notification-delete",
    ),
]
