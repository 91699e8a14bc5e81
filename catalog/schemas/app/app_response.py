"""Response schemas for app listing routes."""

from datetime import datetime

from pydantic import Field

from catalog.schemas.base_schema_model import BaseSchemaModel


class AppResponse(BaseSchemaModel):
    """Full app listing as returned by the API."""

    id: str
    app_name: str
    slug: str
    description: str
    category: str
    download_url: str = Field(..., alias="downloadURL")
    logo_url: str = Field("", alias="logoURL")
    screenshots: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    template_id: str | None = None
    owner_uid: str
    status: str
    rating: float
    rating_count: int
    rating_sum: int
    download_count: int
    view_count: int
    status_updated_by: str | None = None
    status_updated_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AppSearchResult(AppResponse):
    """App listing with its search relevance score."""

    match_score: int


class AppStatusResponse(BaseSchemaModel):
    """Result of a status transition."""

    id: str
    status: str
    updated_at: datetime


class SlugResponse(BaseSchemaModel):
    """Result of slug generation."""

    slug: str
    original: str
