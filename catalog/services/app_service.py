"""App catalog: listing lifecycle, visibility rules, browsing and search."""

from django.utils import timezone

import structlog

from catalog.auth.principal import FirebaseUser
from catalog.enums import AppStatus
from catalog.exceptions import (
    AppNotFoundError,
    InvalidArgumentError,
    PermissionDeniedError,
)
from catalog.models import App
from catalog.repositories import AppRepository
from catalog.schemas.app import (
    AppCreateRequest,
    AppListQuery,
    AppResponse,
    AppSearchResult,
    AppStatusResponse,
    AppUpdateRequest,
    SlugResponse,
)
from catalog.services.naming import generate_slug, random_base36

logger = structlog.get_logger(__name__)

SEARCH_SCAN_LIMIT = 100
MIN_SEARCH_LENGTH = 2

# Fields an update may clear by sending null
NULLABLE_UPDATE_FIELDS = frozenset({"template_id"})


def calculate_match_score(app: App, query: str) -> int:
    """Score how well an app matches a lower-cased search query.

    Name: exact 100, prefix 50, substring 30. Category: exact 20,
    substring 10. Description substring: 5. The three parts add up.
    """
    name = (app.app_name or "").lower()
    category = (app.category or "").lower()
    description = (app.description or "").lower()

    score = 0
    if name == query:
        score += 100
    elif name.startswith(query):
        score += 50
    elif query in name:
        score += 30

    if category == query:
        score += 20
    elif query in category:
        score += 10

    if query in description:
        score += 5

    return score


def can_manage(app: App, user: FirebaseUser | None) -> bool:
    """Whether ``user`` owns the app or is an admin."""
    if user is None:
        return False
    return app.owner_uid == user.uid or user.is_admin


class AppService:
    """Business logic for app listings."""

    def __init__(self, app_repository: type[AppRepository] = AppRepository) -> None:
        """Initialize the app service.

        Args:
            app_repository: App table access
        """
        self.apps = app_repository

    def create_app(self, request: AppCreateRequest, owner_uid: str) -> AppResponse:
        """Create a draft listing owned by ``owner_uid`` with zero aggregates."""
        app = App.objects.create(
            app_name=request.app_name,
            slug=self._unique_slug(request.app_name),
            description=request.description,
            category=request.category,
            download_url=request.download_url,
            logo_url=request.logo_url,
            screenshots=request.screenshots,
            features=request.features,
            template_id=request.template_id,
            owner_uid=owner_uid,
            status=AppStatus.DRAFT.value,
        )
        logger.info("app_created", app_id=app.id, owner_uid=owner_uid, slug=app.slug)
        return AppResponse.model_validate(app)

    def get_app(self, app_id: str, viewer: FirebaseUser | None = None) -> AppResponse:
        """Return an app and count the view.

        Non-active apps are only visible to their owner and to admins; for
        anyone else they do not exist.

        Raises:
            AppNotFoundError: If the app is missing or not visible
        """
        app = self.apps.get_by_id(app_id)
        if app is None or (not app.is_active and not can_manage(app, viewer)):
            raise AppNotFoundError(app_id)

        self.apps.increment_view_count(app.id)
        app.view_count += 1
        return AppResponse.model_validate(app)

    def get_app_by_slug(self, slug: str) -> AppResponse:
        """Return the active app with ``slug``."""
        app = self.apps.get_active_by_slug(slug)
        if app is None:
            raise AppNotFoundError()
        return AppResponse.model_validate(app)

    def update_app(
        self, app_id: str, request: AppUpdateRequest, user: FirebaseUser
    ) -> AppResponse:
        """Apply a partial update made by the owner or an admin.

        Which fields may appear is decided by the request type: only
        ``AdminAppUpdateRequest`` carries ``status``. Renaming the app
        regenerates its slug.

        Raises:
            AppNotFoundError: If the app does not exist
            PermissionDeniedError: If the caller is neither owner nor admin
        """
        app = self.apps.get_by_id(app_id)
        if app is None:
            raise AppNotFoundError(app_id)
        if not can_manage(app, user):
            raise PermissionDeniedError("You do not have permission to update this app")

        changes = {
            field: value
            for field, value in request.changes().items()
            if value is not None or field in NULLABLE_UPDATE_FIELDS
        }
        if "app_name" in changes and changes["app_name"] != app.app_name:
            changes["slug"] = self._unique_slug(changes["app_name"])
        if "status" in changes and changes["status"] != app.status:
            changes["status_updated_by"] = user.uid
            changes["status_updated_at"] = timezone.now()

        for field, value in changes.items():
            setattr(app, field, value)
        app.save()

        logger.info(
            "app_updated",
            app_id=app_id,
            user_id=user.uid,
            fields=sorted(changes),
        )
        return AppResponse.model_validate(app)

    def delete_app(self, app_id: str, user: FirebaseUser) -> None:
        """Delete a listing. Its ratings are left in place.

        Raises:
            AppNotFoundError: If the app does not exist
            PermissionDeniedError: If the caller is neither owner nor admin
        """
        app = self.apps.get_by_id(app_id)
        if app is None:
            raise AppNotFoundError(app_id)
        if not can_manage(app, user):
            raise PermissionDeniedError("You do not have permission to delete this app")

        app.delete()
        logger.info("app_deleted", app_id=app_id, user_id=user.uid)

    def update_status(
        self, app_id: str, status: AppStatus | str, admin_uid: str
    ) -> AppStatusResponse:
        """Set an app's status directly (admin action) and record who did it."""
        status = AppStatus(status).value
        app = self.apps.get_by_id(app_id)
        if app is None:
            raise AppNotFoundError(app_id)

        previous = app.status
        app.status = status
        app.status_updated_by = admin_uid
        app.status_updated_at = timezone.now()
        app.save(
            update_fields=[
                "status",
                "status_updated_by",
                "status_updated_at",
                "updated_at",
            ]
        )

        logger.info(
            "app_status_updated",
            app_id=app_id,
            admin_uid=admin_uid,
            previous_status=previous,
            status=status,
        )
        return AppStatusResponse(
            id=app.id, status=app.status, updated_at=app.updated_at
        )

    def publish(self, app_id: str, admin_uid: str) -> AppStatusResponse:
        """Make an app publicly visible."""
        return self.update_status(app_id, AppStatus.ACTIVE, admin_uid)

    def unpublish(self, app_id: str, admin_uid: str) -> AppStatusResponse:
        """Return an app to draft."""
        return self.update_status(app_id, AppStatus.DRAFT, admin_uid)

    def list_active(self, query: AppListQuery) -> list[AppResponse]:
        """Active apps, optionally within a category, sorted and limited."""
        apps = self.apps.list_active(query.category, query.order_by, query.limit)
        return [AppResponse.model_validate(app) for app in apps]

    def list_by_owner(self, owner_uid: str) -> list[AppResponse]:
        """Every app of one owner, any status, newest first."""
        apps = self.apps.list_by_owner(owner_uid)
        return [AppResponse.model_validate(app) for app in apps]

    def search(self, query: str, limit: int = 20) -> list[AppSearchResult]:
        """Rank up to 100 active apps against ``query`` and keep the best.

        Apps scoring zero are dropped; ties keep their scan order.

        Raises:
            InvalidArgumentError: If the query is shorter than 2 characters
        """
        needle = (query or "").strip().lower()
        if len(needle) < MIN_SEARCH_LENGTH:
            raise InvalidArgumentError("Search query must be at least 2 characters")

        scored = []
        for app in self.apps.list_search_candidates(SEARCH_SCAN_LIMIT):
            score = calculate_match_score(app, needle)
            if score > 0:
                scored.append((score, app))

        scored.sort(key=lambda item: item[0], reverse=True)
        results = [
            AppSearchResult(
                **AppResponse.model_validate(app).model_dump(), match_score=score
            )
            for score, app in scored[:limit]
        ]
        logger.debug("apps_searched", query=needle, matches=len(scored))
        return results

    def generate_slug(self, app_name: str) -> SlugResponse:
        """Preview the slug an app name would get."""
        if not app_name or len(app_name.strip()) < 2:
            raise InvalidArgumentError("App name must be at least 2 characters")
        return SlugResponse(slug=generate_slug(app_name), original=app_name)

    def _unique_slug(self, app_name: str) -> str:
        slug = generate_slug(app_name)
        while App.objects.filter(slug=slug).exists():
            slug = f"{generate_slug(app_name)}-{random_base36(4)}"
        return slug


app_service = AppService()
