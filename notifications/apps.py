"""Django application configuration for notifications."""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class NotificationsConfig(AppConfig):
    """Configuration class for the notifications application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "notifications"

    def ready(self) -> None:
        """Configure structured logging once Django is ready.

        Test settings keep Django's own LOGGING configuration so test output
        stays quiet.
        """
        if getattr(settings, "TEST_MODE", False):
            return

        from notifications.logging import setup_logging  # noqa: PLC0415

        setup_logging()
        logger.info("Structured logging initialized")
