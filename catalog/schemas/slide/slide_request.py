"""Request schemas for hero slider routes."""

from pydantic import Field, field_validator

from catalog.schemas.base_schema_model import BaseSchemaModel, StrictUpdateModel
from catalog.schemas.validators import validate_http_url


class SlideCreateRequest(BaseSchemaModel):
    """Body of POST /api/slider.

    When ``order`` is omitted the slide is appended; otherwise it is
    inserted at that position.
    """

    title: str = Field(..., min_length=1, max_length=100)
    subtitle: str = Field("", max_length=200)
    image_url: str
    app_id: str | None = None
    button_text: str = Field("View App", max_length=30)
    order: int | None = Field(None, ge=0)
    is_active: bool = True

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, value: str) -> str:
        return validate_http_url(value, "Image URL")


class SlideUpdateRequest(StrictUpdateModel):
    """Body of PUT /api/slider/:id; an ``order`` moves the slide."""

    title: str | None = Field(None, min_length=1, max_length=100)
    subtitle: str | None = Field(None, max_length=200)
    image_url: str | None = None
    app_id: str | None = None
    button_text: str | None = Field(None, max_length=30)
    order: int | None = Field(None, ge=0)
    is_active: bool | None = None

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, value: str | None) -> str | None:
        return validate_http_url(value, "Image URL") if value else value


class SlideReorderRequest(BaseSchemaModel):
    """Body of POST /api/slider/reorder."""

    slide_ids: list[str] = Field(..., min_length=1)


class SlideMoveRequest(BaseSchemaModel):
    """Body of POST /api/slider/:id/move."""

    new_index: int
