"""Enumerations for the catalog app."""

from catalog.enums.app_category import AppCategory
from catalog.enums.app_status import AppStatus
from catalog.enums.app_template import AppTemplate
from catalog.enums.user_role import UserRole

__all__ = ["AppCategory", "AppStatus", "AppTemplate", "UserRole"]
