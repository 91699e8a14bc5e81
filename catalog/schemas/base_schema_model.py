"""Base pydantic model shared by request and response schemas."""

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Common configuration for every API schema.

    Fields are snake_case in Python and camelCase on the wire; either form is
    accepted on input. Models can be built straight from ORM instances.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )

    def to_response(self) -> dict:
        """Serialize with wire names and JSON-compatible values."""
        return self.model_dump(by_alias=True, mode="json")


class StrictUpdateModel(BaseSchemaModel):
    """Base for partial updates: unknown or forbidden fields are rejected."""

    model_config = ConfigDict(extra="forbid")


def format_validation_errors(error: ValidationError) -> list[dict[str, str]]:
    """Flatten a pydantic ValidationError into ``[{field, message}]``."""
    details = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "body"
        message = item["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, ") :]
        if item["type"] == "extra_forbidden":
            message = "Field cannot be modified"
        details.append({"field": field, "message": message})
    return details
