"""Upload metadata model."""

from typing import ClassVar

from django.db import models

from catalog.models.identifiers import generate_document_id


class Upload(models.Model):
    """Metadata for one object written to storage by the upload service."""

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_document_id,
        editable=False,
    )
    filename = models.CharField(max_length=255)
    original_name = models.CharField(max_length=255)
    filepath = models.CharField(max_length=500)
    url = models.URLField(max_length=1000, db_index=True)
    mimetype = models.CharField(max_length=50)
    size = models.PositiveIntegerField()
    folder = models.CharField(max_length=200)
    uploaded_by = models.CharField(max_length=128, db_index=True)
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "uploads"
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of the upload."""
        return self.filepath
