"""Repository for upload metadata queries."""

from django.db.models import QuerySet

from catalog.models import Upload


class UploadRepository:
    """Encapsulates Upload table access for the upload service."""

    @staticmethod
    def create_many(uploads: list[Upload]) -> list[Upload]:
        """Insert upload rows in one statement."""
        return Upload.objects.bulk_create(uploads)

    @staticmethod
    def uploaders_of(url: str) -> set[str]:
        """Return the uids recorded as uploaders of ``url``."""
        return set(Upload.objects.filter(url=url).values_list("uploaded_by", flat=True))

    @staticmethod
    def delete_by_url(url: str) -> int:
        """Delete every row pointing at ``url``; returns the number removed."""
        deleted, _ = Upload.objects.filter(url=url).delete()
        return deleted

    @staticmethod
    def list_for_user(user_id: str) -> QuerySet[Upload]:
        """Return every upload recorded for one user."""
        return Upload.objects.filter(uploaded_by=user_id)
