"""DRF permission classes for catalog routes."""

from rest_framework.permissions import BasePermission

from catalog.exceptions import AuthenticationError, PermissionDeniedError

AUTH_REQUIRED_MESSAGE = "Authentication required. Please provide a valid token."


class IsSignedIn(BasePermission):
    """Require a verified ID token."""

    def has_permission(self, request, view):
        """Raise 401 for anonymous callers."""
        if request.user is None:
            raise AuthenticationError(AUTH_REQUIRED_MESSAGE)
        return True


class IsAdmin(BasePermission):
    """Require a verified ID token whose user holds the admin role."""

    def has_permission(self, request, view):
        """Raise 401 for anonymous callers and 403 for non-admins."""
        if request.user is None:
            raise AuthenticationError("Authentication required")
        if not request.user.is_admin:
            raise PermissionDeniedError("Admin access required")
        return True
