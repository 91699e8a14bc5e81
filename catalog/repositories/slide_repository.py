"""Repository for hero slide queries."""

from django.db.models import QuerySet

from catalog.models import HeroSlide


class SlideRepository:
    """Encapsulates HeroSlide table access for the slider service."""

    @staticmethod
    def get_by_id(slide_id: str) -> HeroSlide | None:
        """Return one slide or None."""
        return HeroSlide.objects.filter(id=slide_id).first()

    @staticmethod
    def list_all() -> list[HeroSlide]:
        """Return every slide in display order."""
        return list(HeroSlide.objects.order_by("order", "created_at"))

    @staticmethod
    def list_all_for_update() -> list[HeroSlide]:
        """Return every slide in display order, rows locked.

        Must be called inside ``transaction.atomic()``.
        """
        return list(
            HeroSlide.objects.select_for_update().order_by("order", "created_at")
        )

    @staticmethod
    def list_active() -> QuerySet[HeroSlide]:
        """Return active slides in display order."""
        return HeroSlide.objects.filter(is_active=True).order_by("order", "created_at")

    @staticmethod
    def save_orders(slides: list[HeroSlide]) -> None:
        """Persist ``order`` and ``updated_at`` of the given slides in one query."""
        HeroSlide.objects.bulk_update(slides, ["order", "updated_at"])
