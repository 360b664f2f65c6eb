"""Base pydantic model for centralized configuration of schema definitions."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from notifications.exceptions.delivery_exceptions import InvalidRequestError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class BaseSchemaModel(BaseModel):
    """Base pydantic model for centralized configuration of schema definitions.

    Fields are snake_case in Python and camelCase on the wire, matching the
    payloads the campus web client sends and reads.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )


def parse_request(schema: type[SchemaT], data: Any) -> SchemaT:
    """Validate a request payload into a schema.

    Args:
        schema: Pydantic schema class to validate against.
        data: Raw request payload.

    Returns:
        The validated schema instance.

    Raises:
        InvalidRequestError: If required fields are missing or malformed.
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        fields = sorted(
            {".".join(str(part) for part in error["loc"]) or "body" for error in errors}
        )
        raise InvalidRequestError(
            f"Missing or invalid fields: {', '.join(fields)}",
            errors=errors,
        ) from e
