"""Data access layer for the catalog application."""

from catalog.repositories.app_repository import AppRepository
from catalog.repositories.rating_repository import RatingRepository
from catalog.repositories.slide_repository import SlideRepository
from catalog.repositories.upload_repository import UploadRepository
from catalog.repositories.user_repository import UserRepository

__all__ = [
    "AppRepository",
    "RatingRepository",
    "SlideRepository",
    "UploadRepository",
    "UserRepository",
]
