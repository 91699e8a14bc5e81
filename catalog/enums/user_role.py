"""User role enumeration."""

from enum import Enum


class UserRole(str, Enum):
    """Roles stored on user profiles."""

    USER = "user"
    ADMIN = "admin"
