"""App category enumeration."""

from enum import Enum


class AppCategory(str, Enum):
    """Category display names accepted on app listings."""

    GAMES = "Games"
    PRODUCTIVITY = "Productivity"
    SOCIAL = "Social"
    ENTERTAINMENT = "Entertainment"
    EDUCATION = "Education"
    FINANCE = "Finance"
    HEALTH = "Health & Fitness"
    LIFESTYLE = "Lifestyle"
    SHOPPING = "Shopping"
    TOOLS = "Tools"
    OTHER = "Other"
