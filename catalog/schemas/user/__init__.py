"""User schemas."""

from catalog.schemas.user.user_schemas import AdminStats, RoleUpdateRequest, UserProfile

__all__ = ["AdminStats", "RoleUpdateRequest", "UserProfile"]
