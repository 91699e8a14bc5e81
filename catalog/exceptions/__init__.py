"""Exception handling utilities for the UPlayG API."""

from catalog.exceptions.catalog_exceptions import (
    AppNotFoundError,
    AuthenticationError,
    CatalogError,
    CategoryNotFoundError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
    RatingNotFoundError,
    SlideNotFoundError,
    UploadNotFoundError,
    UserNotFoundError,
)

__all__ = [
    "AppNotFoundError",
    "AuthenticationError",
    "CatalogError",
    "CategoryNotFoundError",
    "InternalError",
    "InvalidArgumentError",
    "NotFoundError",
    "PermissionDeniedError",
    "RatingNotFoundError",
    "SlideNotFoundError",
    "UploadNotFoundError",
    "UserNotFoundError",
]
