"""Domain exceptions raised by catalog services."""

from typing import Any


class CatalogError(Exception):
    """Base exception for errors surfaced to API clients."""

    status_code = 500

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any | None = None,
    ):
        """Initialize catalog error.

        Args:
            message: Error message returned to the client
            status_code: HTTP status code, defaults to the class status code
            details: Optional structured details (e.g. field errors)
        """
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        super().__init__(message)

    @property
    def message(self) -> str:
        """Client-facing error message."""
        return str(self)


class InvalidArgumentError(CatalogError):
    """Malformed or out-of-range input (400)."""

    status_code = 400


class AuthenticationError(CatalogError):
    """Missing, invalid or expired credential (401)."""

    status_code = 401


class PermissionDeniedError(CatalogError):
    """Authenticated caller is neither the owner nor an admin (403)."""

    status_code = 403


class NotFoundError(CatalogError):
    """Requested resource does not exist or is not visible (404)."""

    status_code = 404


class InternalError(CatalogError):
    """Unexpected store or storage failure (500)."""

    status_code = 500


class AppNotFoundError(NotFoundError):
    """App listing not found."""

    def __init__(self, app_id: str | None = None):
        """Initialize app not found error.

        Args:
            app_id: ID of the app that was not found
        """
        self.app_id = app_id
        super().__init__("App not found")


class RatingNotFoundError(NotFoundError):
    """No rating exists for the (app, user) pair."""

    def __init__(self, app_id: str, user_id: str):
        """Initialize rating not found error.

        Args:
            app_id: ID of the rated app
            user_id: ID of the user whose rating was looked up
        """
        self.app_id = app_id
        self.user_id = user_id
        super().__init__("Rating not found")


class SlideNotFoundError(NotFoundError):
    """Hero slide not found."""

    def __init__(self, slide_id: str):
        """Initialize slide not found error.

        Args:
            slide_id: ID of the slide that was not found
        """
        self.slide_id = slide_id
        super().__init__("Slide not found")


class CategoryNotFoundError(NotFoundError):
    """Category id is not part of the static catalog."""

    def __init__(self, category_id: str):
        """Initialize category not found error.

        Args:
            category_id: ID of the unknown category
        """
        self.category_id = category_id
        super().__init__("Category not found")


class UserNotFoundError(NotFoundError):
    """User profile not found."""

    def __init__(self, user_id: str):
        """Initialize user not found error.

        Args:
            user_id: ID of the user that was not found
        """
        self.user_id = user_id
        super().__init__("User not found")


class UploadNotFoundError(NotFoundError):
    """Stored object not found."""

    def __init__(self, file_url: str):
        """Initialize upload not found error.

        Args:
            file_url: Public URL of the missing object
        """
        self.file_url = file_url
        super().__init__("File not found")
