"""Repository for rating queries."""

from django.db.models import QuerySet

from catalog.models import Rating


class RatingRepository:
    """Encapsulates Rating table access for the rating service."""

    @staticmethod
    def get_for_user(app_id: str, user_id: str) -> Rating | None:
        """Return the rating ``user_id`` gave ``app_id``, if any."""
        return Rating.objects.filter(app_id=app_id, user_id=user_id).first()

    @staticmethod
    def get_for_user_for_update(app_id: str, user_id: str) -> Rating | None:
        """Locked variant of :meth:`get_for_user`; call inside a transaction."""
        return (
            Rating.objects.select_for_update()
            .filter(app_id=app_id, user_id=user_id)
            .first()
        )

    @staticmethod
    def create(app_id: str, user_id: str, rating: int, review: str) -> Rating:
        """Insert a new rating row."""
        return Rating.objects.create(
            app_id=app_id, user_id=user_id, rating=rating, review=review
        )

    @staticmethod
    def exists_for_user(app_id: str, user_id: str) -> bool:
        """Whether ``user_id`` has rated ``app_id``."""
        return Rating.objects.filter(app_id=app_id, user_id=user_id).exists()

    @staticmethod
    def list_for_app(app_id: str, limit: int | None = None) -> QuerySet[Rating]:
        """List ratings of one app, newest first."""
        queryset = Rating.objects.filter(app_id=app_id).order_by("-created_at")
        if limit:
            queryset = queryset[:limit]
        return queryset

    @staticmethod
    def values_for_app(app_id: str) -> list[int]:
        """Return every rating value recorded for one app."""
        return list(
            Rating.objects.filter(app_id=app_id).values_list("rating", flat=True)
        )
