"""Hero slider management with a dense, gap-free display order."""

from django.db import transaction
from django.utils import timezone

import structlog

from catalog.exceptions import InvalidArgumentError, SlideNotFoundError
from catalog.models import HeroSlide
from catalog.repositories import AppRepository, SlideRepository
from catalog.schemas.slide import (
    ReorderResult,
    SlideAppSummary,
    SlideCreateRequest,
    SlideResponse,
    SlideToggleResponse,
    SlideUpdateRequest,
)

logger = structlog.get_logger(__name__)


class SliderService:
    """Creates, edits and orders hero slides.

    After every operation the ``order`` values of all slides are exactly
    0..N-1. Operations that touch more than one slide lock every slide row
    and rewrite the changed positions in a single bulk update.
    """

    def __init__(
        self,
        slide_repository: type[SlideRepository] = SlideRepository,
        app_repository: type[AppRepository] = AppRepository,
    ) -> None:
        """Initialize the slider service.

        Args:
            slide_repository: HeroSlide table access
            app_repository: App table access, for linked app details
        """
        self.slides = slide_repository
        self.apps = app_repository

    def create_slide(self, request: SlideCreateRequest) -> SlideResponse:
        """Add a slide at the end, or at ``request.order`` when given.

        An explicit position is clamped to [0, N] and later slides shift
        down by one.
        """
        with transaction.atomic():
            slides = self.slides.list_all_for_update()
            position = len(slides)
            if request.order is not None:
                position = min(request.order, len(slides))

            slide = HeroSlide.objects.create(
                title=request.title,
                subtitle=request.subtitle,
                image_url=request.image_url,
                app_id=request.app_id or None,
                button_text=request.button_text,
                is_active=request.is_active,
                order=position,
            )
            slides.insert(position, slide)
            self._write_orders(slides)

        logger.info("slide_created", slide_id=slide.id, order=position)
        return SlideResponse.model_validate(slide)

    def get_slide(self, slide_id: str) -> SlideResponse:
        """Return one slide.

        Raises:
            SlideNotFoundError: If the slide does not exist
        """
        slide = self.slides.get_by_id(slide_id)
        if slide is None:
            raise SlideNotFoundError(slide_id)
        return SlideResponse.model_validate(slide)

    def list_all_slides(self) -> list[SlideResponse]:
        """Every slide, active or not, in display order."""
        return [SlideResponse.model_validate(slide) for slide in self.slides.list_all()]

    def update_slide(self, slide_id: str, request: SlideUpdateRequest) -> SlideResponse:
        """Apply a partial update; an ``order`` in the patch moves the slide."""
        changes = request.model_dump(exclude_unset=True)
        new_order = changes.pop("order", None)

        with transaction.atomic():
            slides = self.slides.list_all_for_update()
            slide = next((s for s in slides if s.id == slide_id), None)
            if slide is None:
                raise SlideNotFoundError(slide_id)

            for field, value in changes.items():
                if field == "app_id":
                    slide.app_id = value or None
                elif value is not None:
                    setattr(slide, field, value)
            slide.save()

            if new_order is not None:
                self._move(slides, slide, new_order)

        logger.info(
            "slide_updated",
            slide_id=slide_id,
            fields=sorted(changes),
            new_order=new_order,
        )
        return SlideResponse.model_validate(slide)

    def toggle_active(self, slide_id: str) -> SlideToggleResponse:
        """Flip a slide's visibility on the public slider."""
        slide = self.slides.get_by_id(slide_id)
        if slide is None:
            raise SlideNotFoundError(slide_id)

        slide.is_active = not slide.is_active
        slide.save(update_fields=["is_active", "updated_at"])

        logger.info("slide_toggled", slide_id=slide_id, is_active=slide.is_active)
        return SlideToggleResponse(id=slide.id, is_active=slide.is_active)

    def reorder(self, ordered_ids: list[str]) -> ReorderResult:
        """Put the listed slides first, in the given order.

        Slides not listed keep their relative order after the listed ones.

        Raises:
            InvalidArgumentError: If the list is empty, repeats an id or
                names a slide that does not exist. Nothing is written.
        """
        if not ordered_ids:
            raise InvalidArgumentError("slideIds must be a non-empty array")
        if len(set(ordered_ids)) != len(ordered_ids):
            raise InvalidArgumentError("slideIds must not contain duplicates")

        with transaction.atomic():
            slides = self.slides.list_all_for_update()
            by_id = {slide.id: slide for slide in slides}
            unknown = [slide_id for slide_id in ordered_ids if slide_id not in by_id]
            if unknown:
                raise InvalidArgumentError(
                    "Unknown slide ids", details={"slideIds": unknown}
                )

            listed = set(ordered_ids)
            new_sequence = [by_id[slide_id] for slide_id in ordered_ids]
            new_sequence += [slide for slide in slides if slide.id not in listed]
            self._write_orders(new_sequence)

        logger.info("slides_reordered", count=len(ordered_ids), total=len(slides))
        return ReorderResult(count=len(ordered_ids))

    def move_slide(self, slide_id: str, new_index: int) -> list[SlideResponse]:
        """Move one slide to ``new_index`` and return the full ordered list.

        An index outside [0, N-1] leaves every slide where it is.

        Raises:
            SlideNotFoundError: If the slide does not exist
        """
        with transaction.atomic():
            slides = self.slides.list_all_for_update()
            slide = next((s for s in slides if s.id == slide_id), None)
            if slide is None:
                raise SlideNotFoundError(slide_id)
            self._move(slides, slide, new_index)

        return [SlideResponse.model_validate(s) for s in slides]

    def delete_slide(self, slide_id: str) -> None:
        """Delete a slide and close the gap it leaves in the order."""
        with transaction.atomic():
            slides = self.slides.list_all_for_update()
            slide = next((s for s in slides if s.id == slide_id), None)
            if slide is None:
                raise SlideNotFoundError(slide_id)

            slides.remove(slide)
            slide.delete()
            self._write_orders(slides)

        logger.info("slide_deleted", slide_id=slide_id, remaining=len(slides))

    def list_active(self) -> list[SlideResponse]:
        """Active slides in display order, with linked active apps embedded."""
        slides = [
            SlideResponse.model_validate(slide) for slide in self.slides.list_active()
        ]
        app_ids = [slide.app_id for slide in slides if slide.app_id]
        if not app_ids:
            return slides

        apps = self.apps.get_active_by_ids(app_ids)
        for slide in slides:
            app = apps.get(slide.app_id) if slide.app_id else None
            if app is not None:
                slide.app = SlideAppSummary.model_validate(app)
        return slides

    def _move(self, slides: list[HeroSlide], slide: HeroSlide, new_index: int) -> None:
        """Reposition ``slide`` within ``slides`` (in place) and persist."""
        if not 0 <= new_index < len(slides):
            logger.info(
                "slide_move_ignored",
                slide_id=slide.id,
                new_index=new_index,
                total=len(slides),
            )
            return

        slides.remove(slide)
        slides.insert(new_index, slide)
        self._write_orders(slides)
        logger.info("slide_moved", slide_id=slide.id, new_index=new_index)

    def _write_orders(self, slides: list[HeroSlide]) -> None:
        """Assign 0..N-1 following list position; save only what changed."""
        now = timezone.now()
        changed = []
        for index, slide in enumerate(slides):
            if slide.order != index:
                slide.order = index
                slide.updated_at = now
                changed.append(slide)
        if changed:
            self.slides.save_orders(changed)


slider_service = SliderService()
