"""User profile and admin dashboard schemas."""

from datetime import datetime

from pydantic import Field

from catalog.enums import UserRole
from catalog.schemas.app import AppResponse
from catalog.schemas.base_schema_model import BaseSchemaModel


class UserProfile(BaseSchemaModel):
    """A user profile."""

    id: str
    email: str = ""
    name: str = ""
    photo_url: str = Field("", alias="photoURL")
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RoleUpdateRequest(BaseSchemaModel):
    """Body of PATCH /api/admin/users/:id/role."""

    role: UserRole


class AdminStats(BaseSchemaModel):
    """Dashboard counters and the most recent submissions."""

    total_apps: int
    active_apps: int
    pending_apps: int
    total_users: int
    recent_apps: list[AppResponse]
