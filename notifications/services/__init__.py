"""Services for the notifications app."""

from notifications.services.health_service import HealthService, health_service

# Note: DeliveryService is not exported here to avoid importing models during
# Django app initialization. Import directly from the module.

__all__ = ["HealthService", "health_service"]
