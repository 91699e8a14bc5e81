"""User profiles and role management."""

import structlog

from catalog.auth.principal import FirebaseUser
from catalog.auth.roles import invalidate_role_cache
from catalog.enums import UserRole
from catalog.exceptions import UserNotFoundError
from catalog.repositories import UserRepository
from catalog.schemas.user import UserProfile

logger = structlog.get_logger(__name__)


class UserService:
    """Maintains the users table that backs profiles and admin roles."""

    def __init__(self, user_repository: type[UserRepository] = UserRepository) -> None:
        """Initialize the user service.

        Args:
            user_repository: User table access
        """
        self.users = user_repository

    def get_or_create_profile(self, principal: FirebaseUser) -> UserProfile:
        """Return the caller's profile, creating it from token claims."""
        user, created = self.users.get_or_create(
            principal.uid,
            email=principal.email or "",
            name=principal.name or "",
            photo_url=principal.picture or "",
        )
        if created:
            logger.info("user_profile_created", user_id=user.id)
        return UserProfile.model_validate(user)

    def list_users(self) -> list[UserProfile]:
        """All profiles, newest first."""
        return [UserProfile.model_validate(user) for user in self.users.list_all()]

    def set_role(self, user_id: str, role: UserRole | str) -> UserProfile:
        """Change a user's role.

        Raises:
            UserNotFoundError: If the user has no profile
        """
        role = UserRole(role).value
        user = self.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        previous = user.role
        user.role = role
        user.save(update_fields=["role", "updated_at"])
        invalidate_role_cache(user_id)

        logger.info(
            "user_role_changed",
            user_id=user_id,
            previous_role=previous,
            role=role,
        )
        return UserProfile.model_validate(user)


user_service = UserService()
