"""Repository for user profile queries."""

from django.db.models import QuerySet

from catalog.enums import UserRole
from catalog.models import User


class UserRepository:
    """Encapsulates User table access."""

    @staticmethod
    def get_by_id(user_id: str) -> User | None:
        """Return one user profile or None."""
        return User.objects.filter(id=user_id).first()

    @staticmethod
    def get_users_by_ids(user_ids: list[str]) -> dict[str, User]:
        """Batch lookup of users keyed by id."""
        return {user.id: user for user in User.objects.filter(id__in=user_ids)}

    @staticmethod
    def get_or_create(
        user_id: str, email: str = "", name: str = "", photo_url: str = ""
    ) -> tuple[User, bool]:
        """Return the profile for ``user_id``, creating it with role user."""
        return User.objects.get_or_create(
            id=user_id,
            defaults={
                "email": email,
                "name": name,
                "photo_url": photo_url,
                "role": UserRole.USER.value,
            },
        )

    @staticmethod
    def is_admin(user_id: str) -> bool:
        """Whether ``user_id`` has the admin role."""
        return User.objects.filter(id=user_id, role=UserRole.ADMIN.value).exists()

    @staticmethod
    def list_all() -> QuerySet[User]:
        """Return every user, newest first."""
        return User.objects.order_by("-created_at")

    @staticmethod
    def count() -> int:
        """Count user profiles."""
        return User.objects.count()
