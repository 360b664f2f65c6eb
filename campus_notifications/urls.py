"""Root URL configuration for the campus notification service."""

from django.urls import include, path

from notifications.urls import health_urlpatterns

urlpatterns = [
    path("health/", include(health_urlpatterns)),
    path("api/notifications/", include("notifications.urls")),
]
