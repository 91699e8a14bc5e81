"""Request schemas for app listing routes."""

from typing import Literal

from pydantic import Field, field_validator

from catalog.enums import AppCategory, AppStatus, AppTemplate
from catalog.schemas.base_schema_model import BaseSchemaModel, StrictUpdateModel
from catalog.schemas.validators import (
    validate_app_name,
    validate_features,
    validate_http_url,
)

SORTABLE_FIELDS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "rating": "rating",
    "ratingCount": "rating_count",
    "viewCount": "view_count",
    "downloadCount": "download_count",
    "appName": "app_name",
}


class AppCreateRequest(BaseSchemaModel):
    """Body of POST /api/apps.

    Owner, status and rating aggregates are assigned by the server; any such
    keys in the body are ignored.
    """

    app_name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=50, max_length=1000)
    category: AppCategory
    download_url: str = Field(..., alias="downloadURL")
    logo_url: str = Field("", alias="logoURL")
    screenshots: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    template_id: AppTemplate | None = None

    @field_validator("app_name")
    @classmethod
    def check_app_name(cls, value: str) -> str:
        return validate_app_name(value)

    @field_validator("features")
    @classmethod
    def check_features(cls, value: list[str]) -> list[str]:
        return validate_features(value)

    @field_validator("download_url")
    @classmethod
    def check_download_url(cls, value: str) -> str:
        return validate_http_url(value, "Download URL")

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, value: str) -> str:
        return validate_http_url(value, "Logo URL") if value else value


class AppUpdateRequest(StrictUpdateModel):
    """Body of PUT /api/apps/:id for owners.

    Only listing content can change; status, owner and aggregates are not
    fields here and are rejected when present.
    """

    app_name: str | None = Field(None, min_length=2, max_length=100)
    description: str | None = Field(None, min_length=50, max_length=1000)
    category: AppCategory | None = None
    download_url: str | None = Field(None, alias="downloadURL")
    logo_url: str | None = Field(None, alias="logoURL")
    screenshots: list[str] | None = None
    features: list[str] | None = None
    template_id: AppTemplate | None = None

    @field_validator("app_name")
    @classmethod
    def check_app_name(cls, value: str | None) -> str | None:
        return validate_app_name(value) if value is not None else value

    @field_validator("features")
    @classmethod
    def check_features(cls, value: list[str] | None) -> list[str] | None:
        return validate_features(value) if value is not None else value

    @field_validator("download_url")
    @classmethod
    def check_download_url(cls, value: str | None) -> str | None:
        return validate_http_url(value, "Download URL") if value else value

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, value: str | None) -> str | None:
        return validate_http_url(value, "Logo URL") if value else value

    def changes(self) -> dict:
        """Model fields explicitly present in the body, by attribute name."""
        return self.model_dump(exclude_unset=True)


class AdminAppUpdateRequest(AppUpdateRequest):
    """Body of PUT /api/apps/:id for admins; may also set the status."""

    status: AppStatus | None = None


class AppStatusUpdateRequest(BaseSchemaModel):
    """Body of PATCH /api/apps/:id/status."""

    status: AppStatus


class SlugRequest(BaseSchemaModel):
    """Body of POST /api/apps/generate-slug."""

    app_name: str = Field(..., min_length=2, max_length=100)


class AppListQuery(BaseSchemaModel):
    """Query string of GET /api/apps."""

    category: AppCategory | None = None
    limit: int = 20
    sort_by: Literal[
        "createdAt",
        "updatedAt",
        "rating",
        "ratingCount",
        "viewCount",
        "downloadCount",
        "appName",
    ] = "createdAt"
    order: Literal["asc", "desc"] = "desc"

    @field_validator("limit")
    @classmethod
    def clamp_limit(cls, value: int) -> int:
        return max(1, min(value, 100))

    @property
    def order_by(self) -> str:
        """Django ``order_by`` expression for the requested sort."""
        column = SORTABLE_FIELDS[self.sort_by]
        return column if self.order == "asc" else f"-{column}"


class SearchQuery(BaseSchemaModel):
    """Query string of GET /api/apps/search."""

    q: str = Field(..., min_length=2)
    limit: int = 20

    @field_validator("limit")
    @classmethod
    def clamp_limit(cls, value: int) -> int:
        return max(1, min(value, 100))
