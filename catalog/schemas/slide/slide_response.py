"""Response schemas for hero slider routes."""

from datetime import datetime

from pydantic import Field

from catalog.schemas.base_schema_model import BaseSchemaModel


class SlideAppSummary(BaseSchemaModel):
    """Linked app details embedded in public slides."""

    id: str
    app_name: str
    logo_url: str = Field("", alias="logoURL")
    category: str


class SlideResponse(BaseSchemaModel):
    """A hero slide."""

    id: str
    title: str
    subtitle: str = ""
    image_url: str
    app_id: str | None = None
    button_text: str
    is_active: bool
    order: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    app: SlideAppSummary | None = None


class SlideToggleResponse(BaseSchemaModel):
    """Result of toggling a slide's visibility."""

    id: str
    is_active: bool


class ReorderResult(BaseSchemaModel):
    """Number of slides whose position was rewritten."""

    count: int
