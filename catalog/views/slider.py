"""Hero slider routes under /api/slider."""

from rest_framework import status

from catalog.schemas.slide import (
    SlideCreateRequest,
    SlideMoveRequest,
    SlideReorderRequest,
    SlideUpdateRequest,
)
from catalog.services.slider_service import slider_service
from catalog.views.base import ADMIN, CatalogAPIView


class SliderView(CatalogAPIView):
    """Public slider and slide creation."""

    method_permissions = {"POST": ADMIN}

    def get(self, request):
        """Active slides in display order, with linked apps embedded."""
        slides = slider_service.list_active()
        return self.success(slides, count=len(slides))

    def post(self, request):
        """Create a slide at the end, or at ``order`` when given.

        Returns:
            201 Created with the new slide
            400 Bad Request if validation fails
            401 Unauthorized without a valid token
            403 Forbidden for non-admins
        """
        create_request = self.validate(SlideCreateRequest, request.data)
        slide = slider_service.create_slide(create_request)
        return self.success(
            slide,
            status_code=status.HTTP_201_CREATED,
            message="Slide created successfully",
        )


class SliderAllView(CatalogAPIView):
    """Every slide, including inactive ones."""

    method_permissions = {"GET": ADMIN}

    def get(self, request):
        slides = slider_service.list_all_slides()
        return self.success(slides, count=len(slides))


class SliderReorderView(CatalogAPIView):
    method_permissions = {"POST": ADMIN}

    def post(self, request):
        """Put the listed slides first, in the given order."""
        reorder_request = self.validate(SlideReorderRequest, request.data)
        result = slider_service.reorder(reorder_request.slide_ids)
        return self.success(result, message="Slides reordered successfully")


class SlideDetailView(CatalogAPIView):
    """Read, edit and delete one slide."""

    method_permissions = {"GET": ADMIN, "PUT": ADMIN, "DELETE": ADMIN}

    def get(self, request, slide_id):
        return self.success(slider_service.get_slide(slide_id))

    def put(self, request, slide_id):
        """Partially update a slide; ``order`` moves it."""
        update_request = self.validate(SlideUpdateRequest, request.data)
        slide = slider_service.update_slide(slide_id, update_request)
        return self.success(slide, message="Slide updated successfully")

    def delete(self, request, slide_id):
        """Delete a slide; later slides move up to close the gap."""
        slider_service.delete_slide(slide_id)
        return self.success(message="Slide deleted successfully")


class SlideToggleView(CatalogAPIView):
    method_permissions = {"PATCH": ADMIN}

    def patch(self, request, slide_id):
        result = slider_service.toggle_active(slide_id)
        state = "activated" if result.is_active else "deactivated"
        return self.success(result, message=f"Slide {state} successfully")


class SlideMoveView(CatalogAPIView):
    """Move one slide to a new position."""

    method_permissions = {"POST": ADMIN}

    def post(self, request, slide_id):
        """Returns the full slide list in its new order."""
        move_request = self.validate(SlideMoveRequest, request.data)
        slides = slider_service.move_slide(slide_id, move_request.new_index)
        return self.success(slides, count=len(slides))
