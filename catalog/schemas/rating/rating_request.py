"""Request schemas for rating routes."""

from typing import Any

from pydantic import Field, field_validator

from catalog.schemas.base_schema_model import BaseSchemaModel


class RatingRequest(BaseSchemaModel):
    """Body of POST /api/ratings/:appId."""

    rating: int = Field(..., ge=1, le=5)
    review: str | None = Field(None, max_length=500)

    @field_validator("rating", mode="before")
    @classmethod
    def reject_boolean_rating(cls, value: Any) -> Any:
        # True/False are not star values
        if isinstance(value, bool):
            raise ValueError("Rating must be an integer between 1 and 5")
        return value


class RatingListQuery(BaseSchemaModel):
    """Query string of GET /api/ratings/:appId."""

    limit: int = Field(50, ge=1, le=100)
    include_user_info: bool = False
