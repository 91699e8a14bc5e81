"""App listing model."""

from typing import ClassVar

from django.db import models

from catalog.enums import AppStatus
from catalog.models.identifiers import generate_document_id


class App(models.Model):
    """A third-party application listed in the catalog.

    The rating aggregates (``rating``, ``rating_count``, ``rating_sum``) are
    owned by the rating service and must satisfy
    ``rating == round(rating_sum / rating_count, 1)`` whenever
    ``rating_count > 0``, and ``0`` otherwise.

    Attributes:
        id: Opaque document id.
        app_name: Display name.
        slug: URL slug, regenerated when the app is renamed.
        description: Long description (50..1000 characters).
        category: Category display name, e.g. "Health & Fitness".
        download_url: External download link.
        logo_url: Public URL of the logo image.
        screenshots: Public URLs of screenshot images.
        features: Up to 10 short feature strings.
        template_id: Optional presentation template.
        owner_uid: Identity-provider uid of the creator.
        status: draft, active or disabled; only admins change it.
        rating: Average rating rounded to one decimal.
        rating_count: Number of ratings.
        rating_sum: Sum of rating values.
        download_count: Download counter.
        view_count: Incremented on every read by id.
        status_updated_by: uid of the admin who last changed the status.
        status_updated_at: When the status was last changed.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_document_id,
        editable=False,
    )
    app_name = models.CharField(max_length=100)
    slug = models.CharField(max_length=150, unique=True)
    description = models.TextField()
    category = models.CharField(max_length=50)
    download_url = models.URLField(max_length=500)
    logo_url = models.URLField(max_length=500, blank=True, default="")
    screenshots = models.JSONField(default=list, blank=True)
    features = models.JSONField(default=list, blank=True)
    template_id = models.CharField(max_length=20, blank=True, null=True)
    owner_uid = models.CharField(max_length=128, db_index=True)
    status = models.CharField(
        max_length=10,
        choices=[(s.value, s.value) for s in AppStatus],
        default=AppStatus.DRAFT.value,
    )
    rating = models.FloatField(default=0)
    rating_count = models.PositiveIntegerField(default=0)
    rating_sum = models.PositiveIntegerField(default=0)
    download_count = models.PositiveIntegerField(default=0)
    view_count = models.PositiveIntegerField(default=0)
    status_updated_by = models.CharField(max_length=128, blank=True, null=True)
    status_updated_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "apps"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["status", "-created_at"]),
            models.Index(fields=["status", "category"]),
            models.Index(fields=["owner_uid", "-created_at"]),
        ]

    def __str__(self) -> str:
        """Return string representation of the app."""
        return f"{self.app_name} ({self.status})"

    def __repr__(self) -> str:
        """Return detailed representation of the app."""
        return f"<App(id={self.id}, slug='{self.slug}', status={self.status})>"

    @property
    def is_active(self) -> bool:
        """Whether the app is publicly visible."""
        return self.status == AppStatus.ACTIVE.value
