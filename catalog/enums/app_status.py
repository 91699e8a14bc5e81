"""App listing lifecycle states."""

from enum import Enum


class AppStatus(str, Enum):
    """Lifecycle states of an app listing.

    Apps are created as drafts and only an admin moves them to active or
    disabled.
    """

    DRAFT = "draft"
    ACTIVE = "active"
    DISABLED = "disabled"
