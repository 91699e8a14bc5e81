"""Hero slider model."""

from typing import ClassVar

from django.db import models

from catalog.models.identifiers import generate_document_id


class HeroSlide(models.Model):
    """A banner on the home page carousel.

    ``order`` values across all slides form the dense sequence 0..N-1; the
    slider service rewrites them on every create, move, reorder and delete.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_document_id,
        editable=False,
    )
    title = models.CharField(max_length=100)
    subtitle = models.CharField(max_length=200, blank=True, default="")
    image_url = models.URLField(max_length=500)
    app_id = models.CharField(max_length=32, blank=True, null=True)
    button_text = models.CharField(max_length=30, default="View App")
    is_active = models.BooleanField(default=True)
    order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "hero_slides"
        ordering: ClassVar[list[str]] = ["order", "created_at"]

    def __str__(self) -> str:
        """Return string representation of the slide."""
        return f"#{self.order} {self.title}"
