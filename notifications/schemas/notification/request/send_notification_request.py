"""Request schema for sending a notification."""

from typing import Annotated, Any

from pydantic import Field, StringConstraints, field_validator, model_validator

from notifications.constants import BROADCAST, MAX_USER_ID_LENGTH
from notifications.enums import Role, Severity
from notifications.schemas.base_schema_model import BaseSchemaModel

UserId = Annotated[str, StringConstraints(max_length=MAX_USER_ID_LENGTH)]


class RecipientSpec(BaseSchemaModel):
    """Who a notification is addressed to.

    ``user_ids`` is either the single sentinel ``["BROADCAST"]`` or a list of
    concrete user ids.
    """

    role: Role = Field(..., description="Role class the notification targets")
    user_ids: list[UserId] = Field(
        ...,
        min_length=1,
        description="Recipient user ids, or ['BROADCAST'] for every user of role",
    )

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, value: Any) -> Role:
        """Accept role names in any casing."""
        return Role.parse(value)

    @field_validator("user_ids")
    @classmethod
    def reject_blank_ids(cls, value: list[str]) -> list[str]:
        """Reject blank user ids."""
        if any(not user_id for user_id in value):
            raise ValueError("user ids must be non-empty")
        return value

    @model_validator(mode="after")
    def reject_mixed_broadcast(self) -> "RecipientSpec":
        """A broadcast cannot also name individual recipients."""
        if BROADCAST in self.user_ids and len(set(self.user_ids)) > 1:
            raise ValueError(f"{BROADCAST} cannot be combined with user ids")
        return self

    @property
    def is_broadcast(self) -> bool:
        """Whether this addresses every user of the role."""
        return BROADCAST in self.user_ids

    @property
    def target_ids(self) -> list[str]:
        """Distinct recipient ids in request order."""
        return list(dict.fromkeys(self.user_ids))


class SendNotificationRequest(BaseSchemaModel):
    """Request body for POST /create."""

    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    severity: Severity = Field(
        Severity.INFO,
        alias="type",
        description="Info, Warning or Success (default Info)",
    )
    recipient: RecipientSpec
    action_link: str | None = Field(None, max_length=500)
    metadata: dict[str, Any] | None = None

    @field_validator("severity", mode="before")
    @classmethod
    def default_severity(cls, value: Any) -> Any:
        """Treat a missing or blank type as Info and ignore casing."""
        if isinstance(value, str):
            value = value.strip()
        if not value:
            return Severity.INFO
        if isinstance(value, str):
            for severity in Severity:
                if severity.value.lower() == value.lower():
                    return severity
        return value
