"""Liveness and readiness response schemas."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel
from notifications.schemas.health.dependency_health import DependencyHealth


class LivenessResponse(BaseSchemaModel):
    """Response model for liveness checks."""

    status: str = Field(..., description="Liveness status")


class ReadinessResponse(BaseSchemaModel):
    """Response model for readiness checks."""

    ready: bool = Field(..., description="Service is ready to serve requests")
    status: str = Field(..., description="Overall status: 'ready' or 'degraded'")
    degraded: bool = Field(
        ..., description="Whether service is running in degraded mode"
    )
    dependencies: dict[str, DependencyHealth] = Field(
        ..., description="Status of each dependency"
    )
