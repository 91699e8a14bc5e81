"""Admin dashboard queries."""

import structlog

from catalog.enums import AppStatus
from catalog.repositories import AppRepository, UserRepository
from catalog.schemas.app import AppResponse
from catalog.schemas.user import AdminStats

logger = structlog.get_logger(__name__)

RECENT_APPS_LIMIT = 5


class AdminService:
    """Read-only views over every app and user for administrators."""

    def __init__(
        self,
        app_repository: type[AppRepository] = AppRepository,
        user_repository: type[UserRepository] = UserRepository,
    ) -> None:
        self.apps = app_repository
        self.users = user_repository

    def get_stats(self) -> AdminStats:
        """Counts of apps by state and of users, plus the latest submissions.

        Pending apps are those still in draft.
        """
        recent = self.apps.list_all()[:RECENT_APPS_LIMIT]
        stats = AdminStats(
            total_apps=self.apps.count(),
            active_apps=self.apps.count(AppStatus.ACTIVE.value),
            pending_apps=self.apps.count(AppStatus.DRAFT.value),
            total_users=self.users.count(),
            recent_apps=[AppResponse.model_validate(app) for app in recent],
        )
        logger.info(
            "admin_stats_requested",
            total_apps=stats.total_apps,
            pending_apps=stats.pending_apps,
        )
        return stats

    def list_apps(self, status: AppStatus | str | None = None) -> list[AppResponse]:
        """Every app regardless of status (optionally one status), newest first."""
        status_value = AppStatus(status).value if status else None
        return [
            AppResponse.model_validate(app) for app in self.apps.list_all(status_value)
        ]


admin_service = AdminService()
