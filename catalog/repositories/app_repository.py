"""Repository for app listing queries."""

from django.db.models import F, QuerySet

from catalog.enums import AppStatus
from catalog.models import App


class AppRepository:
    """Encapsulates App table access for the catalog services."""

    @staticmethod
    def get_by_id(app_id: str) -> App | None:
        """Return the app with ``app_id`` regardless of status."""
        return App.objects.filter(id=app_id).first()

    @staticmethod
    def get_for_update(app_id: str) -> App | None:
        """Return the app row locked until the surrounding transaction ends.

        Must be called inside ``transaction.atomic()``.
        """
        return App.objects.select_for_update().filter(id=app_id).first()

    @staticmethod
    def get_active_by_slug(slug: str) -> App | None:
        """Return the active app with ``slug``."""
        return App.objects.filter(slug=slug, status=AppStatus.ACTIVE.value).first()

    @staticmethod
    def get_active_by_ids(app_ids: list[str]) -> dict[str, App]:
        """Batch lookup of active apps keyed by id."""
        apps = App.objects.filter(id__in=app_ids, status=AppStatus.ACTIVE.value)
        return {app.id: app for app in apps}

    @staticmethod
    def list_active(
        category: str | None, order_by: str, limit: int
    ) -> QuerySet[App]:
        """List active apps, optionally within one category."""
        queryset = App.objects.filter(status=AppStatus.ACTIVE.value)
        if category:
            queryset = queryset.filter(category=category)
        return queryset.order_by(order_by, "-created_at")[:limit]

    @staticmethod
    def list_search_candidates(limit: int) -> QuerySet[App]:
        """Return the bounded set of active apps a search scans."""
        return App.objects.filter(status=AppStatus.ACTIVE.value).order_by(
            "-created_at"
        )[:limit]

    @staticmethod
    def list_by_owner(owner_uid: str) -> QuerySet[App]:
        """List every app of one owner, newest first."""
        return App.objects.filter(owner_uid=owner_uid).order_by("-created_at")

    @staticmethod
    def list_all(status: str | None = None) -> QuerySet[App]:
        """List every app, optionally filtered by status, newest first."""
        queryset = App.objects.all()
        if status:
            queryset = queryset.filter(status=status)
        return queryset.order_by("-created_at")

    @staticmethod
    def count(status: str | None = None) -> int:
        """Count apps, optionally with one status."""
        queryset = App.objects.all()
        if status:
            queryset = queryset.filter(status=status)
        return queryset.count()

    @staticmethod
    def increment_view_count(app_id: str) -> None:
        """Atomically add one to the app's view counter."""
        App.objects.filter(id=app_id).update(view_count=F("view_count") + 1)
