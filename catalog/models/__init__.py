"""Database models for the catalog application."""

from catalog.models.app import App
from catalog.models.hero_slide import HeroSlide
from catalog.models.rating import Rating
from catalog.models.upload import Upload
from catalog.models.user import User

__all__ = [
    "App",
    "HeroSlide",
    "Rating",
    "Upload",
    "User",
]
