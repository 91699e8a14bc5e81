"""Rating model."""

from typing import ClassVar

from django.db import models

from catalog.models.identifiers import generate_document_id


class Rating(models.Model):
    """One user's 1-5 star rating of one app.

    ``app_id`` is a plain string rather than a foreign key: deleting an app
    leaves its ratings in place.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_document_id,
        editable=False,
    )
    app_id = models.CharField(max_length=32, db_index=True)
    user_id = models.CharField(max_length=128)
    rating = models.PositiveSmallIntegerField()
    review = models.CharField(max_length=500, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "ratings"
        ordering: ClassVar[list[str]] = ["-created_at"]
        constraints: ClassVar[list] = [
            models.UniqueConstraint(
                fields=["app_id", "user_id"], name="unique_rating_per_user_app"
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of the rating."""
        return f"{self.rating} stars for app {self.app_id} by {self.user_id}"
