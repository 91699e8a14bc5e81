"""User profile model."""

from typing import ClassVar

from django.db import models

from catalog.enums import UserRole


class User(models.Model):
    """Profile of a signed-in user, keyed by identity-provider uid.

    Rows are created from token claims on first sight; ``role`` is the only
    source of admin privileges.
    """

    id = models.CharField(primary_key=True, max_length=128)
    email = models.EmailField(max_length=255, blank=True, default="")
    name = models.CharField(max_length=255, blank=True, default="")
    photo_url = models.URLField(max_length=500, blank=True, default="")
    role = models.CharField(
        max_length=10,
        choices=[(role.value, role.value) for role in UserRole],
        default=UserRole.USER.value,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.name or self.id} ({self.email})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(id={self.id}, role={self.role})>"

    @property
    def is_admin(self) -> bool:
        """Whether the user holds the admin role."""
        return self.role == UserRole.ADMIN.value
