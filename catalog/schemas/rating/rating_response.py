"""Response schemas for rating routes."""

from datetime import datetime

from pydantic import Field

from catalog.schemas.base_schema_model import BaseSchemaModel


class ReviewerInfo(BaseSchemaModel):
    """Public profile fields shown next to a review."""

    name: str
    photo_url: str | None = Field(None, alias="photoURL")


class RatingResponse(BaseSchemaModel):
    """A stored rating."""

    id: str
    app_id: str
    user_id: str
    rating: int
    review: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: ReviewerInfo | None = None


class RatingResult(RatingResponse):
    """Outcome of a rating submission; ``is_update`` selects 200 vs 201."""

    is_update: bool


class RatingSummary(BaseSchemaModel):
    """Average, count and per-star distribution of an app's ratings."""

    average: float
    total: int
    distribution: dict[str, int]
