"""Landing page templates an app listing can use."""

from enum import Enum


class AppTemplate(str, Enum):
    """Presentation template for an app detail page."""

    MODERN = "modern"
    PLAYFUL = "playful"
    PROFESSIONAL = "professional"
    MINIMAL = "minimal"
    DARK = "dark"
    GRADIENT = "gradient"
