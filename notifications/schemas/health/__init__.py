"""Health check schemas."""

from notifications.schemas.health.dependency_health import DependencyHealth
from notifications.schemas.health.probe_responses import (
    LivenessResponse,
    ReadinessResponse,
)

__all__ = ["DependencyHealth", "LivenessResponse", "ReadinessResponse"]
