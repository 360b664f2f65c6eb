"""Enumerations for the notifications app."""

from notifications.enums.health_status import HealthStatus
from notifications.enums.role import Role
from notifications.enums.severity import Severity

__all__ = ["HealthStatus", "Role", "Severity"]
