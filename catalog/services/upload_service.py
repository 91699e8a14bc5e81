"""Image uploads to object storage with metadata records."""

from collections import Counter
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from django.conf import settings
from django.core.files.uploadedfile import UploadedFile
from django.db import transaction

import structlog

from catalog.auth.principal import FirebaseUser
from catalog.constants.uploads import (
    ALLOWED_IMAGE_TYPES,
    DEFAULT_UPLOAD_FOLDER,
    LOGO_FOLDER,
    MAX_FILE_SIZE,
    MAX_FILES_PER_REQUEST,
    SCREENSHOT_FOLDER,
    SLIDE_FOLDER,
)
from catalog.exceptions import (
    CatalogError,
    InternalError,
    InvalidArgumentError,
    PermissionDeniedError,
    UploadNotFoundError,
)
from catalog.models import Upload
from catalog.repositories import UploadRepository
from catalog.schemas.upload import MultiUploadResult, UploadResult, UploadStats
from catalog.services.naming import generate_safe_filename
from catalog.services.storage import ObjectStorage, object_storage

logger = structlog.get_logger(__name__)


@dataclass
class StoredObject:
    """A file written to storage whose metadata row is not saved yet."""

    key: str
    filename: str
    original_name: str
    url: str
    mimetype: str
    size: int
    folder: str
    metadata: dict[str, Any] = field(default_factory=dict)


class UploadService:
    """Validates images, writes them to object storage and records them.

    Multi-file uploads write to storage in parallel on a thread pool. Only
    storage I/O runs on the pool: metadata rows are inserted afterwards in
    one transaction on the calling thread, and if any write fails the
    objects already written by the same call are removed.
    """

    def __init__(
        self,
        storage: ObjectStorage = object_storage,
        upload_repository: type[UploadRepository] = UploadRepository,
        max_file_size: int | None = None,
        max_files: int | None = None,
        max_workers: int | None = None,
    ) -> None:
        """Initialize the upload service.

        Args:
            storage: Object storage the files are written to
            upload_repository: Upload table access
            max_file_size: Per-file byte limit (UPLOAD_MAX_FILE_SIZE)
            max_files: Files per request limit (UPLOAD_MAX_FILES)
            max_workers: Thread pool size for parallel writes (UPLOAD_MAX_WORKERS)
        """
        self.storage = storage
        self.uploads = upload_repository
        self._max_file_size = max_file_size
        self._max_files = max_files
        self._max_workers = max_workers

    @property
    def max_file_size(self) -> int:
        return self._max_file_size or getattr(
            settings, "UPLOAD_MAX_FILE_SIZE", MAX_FILE_SIZE
        )

    @property
    def max_files(self) -> int:
        return self._max_files or getattr(
            settings, "UPLOAD_MAX_FILES", MAX_FILES_PER_REQUEST
        )

    @property
    def max_workers(self) -> int:
        return self._max_workers or getattr(settings, "UPLOAD_MAX_WORKERS", 4)

    def validate_file(self, file: UploadedFile | None) -> None:
        """Reject missing files, non-image types and oversized files.

        Raises:
            InvalidArgumentError: If the file is not acceptable
        """
        if file is None:
            raise InvalidArgumentError("No file provided")
        if file.content_type not in ALLOWED_IMAGE_TYPES:
            raise InvalidArgumentError(
                f"Invalid file type. Allowed types: {', '.join(ALLOWED_IMAGE_TYPES)}"
            )
        if file.size > self.max_file_size:
            raise InvalidArgumentError(
                f"File too large. Maximum size: {self.max_file_size // (1024 * 1024)}MB"
            )

    def upload_file(
        self,
        file: UploadedFile | None,
        user_id: str,
        folder: str = DEFAULT_UPLOAD_FOLDER,
        prefix: str = "",
        metadata: dict[str, Any] | None = None,
    ) -> UploadResult:
        """Store one image and record it.

        Args:
            file: Uploaded image
            user_id: Uploader uid, recorded on the metadata row
            folder: Storage folder
            prefix: Optional filename prefix
            metadata: Extra attributes kept on the metadata row

        Returns:
            The stored file with its public URL
        """
        self.validate_file(file)
        stored = self._store(file, folder, prefix, metadata or {})
        try:
            upload = Upload.objects.create(**self._row_kwargs(stored, user_id))
        except Exception:
            self._discard([stored])
            raise

        logger.info(
            "file_uploaded",
            upload_id=upload.id,
            key=stored.key,
            size=stored.size,
            user_id=user_id,
        )
        return UploadResult.model_validate(upload)

    def upload_files(
        self,
        files: list[UploadedFile],
        user_id: str,
        folder: str = DEFAULT_UPLOAD_FOLDER,
        prefix: str = "",
        metadata: dict[str, Any] | None = None,
    ) -> MultiUploadResult:
        """Store several images; all succeed or none are kept.

        Each file is named with ``<prefix or "file">_<n>`` (1-based) as its
        filename prefix.

        Raises:
            InvalidArgumentError: If there are no files, too many files, or
                any file fails validation. Nothing is stored in that case.
            InternalError: If a storage write fails
        """
        if not files:
            raise InvalidArgumentError("No files provided")
        if len(files) > self.max_files:
            raise InvalidArgumentError(
                f"Maximum {self.max_files} files allowed per upload"
            )
        for file in files:
            self.validate_file(file)

        base_prefix = prefix or "file"
        stored: list[StoredObject | None] = [None] * len(files)
        failure: Exception | None = None

        with ThreadPoolExecutor(
            max_workers=min(len(files), self.max_workers),
            thread_name_prefix="uplayg_upload",
        ) as executor:
            future_to_index = {
                executor.submit(
                    self._store,
                    file,
                    folder,
                    f"{base_prefix}_{index + 1}",
                    metadata or {},
                ): index
                for index, file in enumerate(files)
            }
            for future in as_completed(future_to_index):
                index = future_to_index[future]
                try:
                    stored[index] = future.result()
                except Exception as exc:
                    logger.error(
                        "file_store_failed",
                        original_name=files[index].name,
                        error=str(exc),
                    )
                    failure = failure or exc

        written = [item for item in stored if item is not None]
        if failure is not None:
            self._discard(written)
            if isinstance(failure, CatalogError):
                raise failure
            raise InternalError("Failed to upload files") from failure

        try:
            with transaction.atomic():
                uploads = self.uploads.create_many(
                    [Upload(**self._row_kwargs(item, user_id)) for item in written]
                )
        except Exception:
            self._discard(written)
            raise

        logger.info(
            "files_uploaded",
            count=len(uploads),
            folder=folder,
            user_id=user_id,
        )
        results = [UploadResult.model_validate(upload) for upload in uploads]
        return MultiUploadResult(uploads=results, count=len(results))

    def upload_app_logo(
        self, file: UploadedFile | None, app_id: str | None, user_id: str
    ) -> UploadResult:
        """Store an app logo under ``apps/logos``."""
        return self.upload_file(
            file,
            user_id,
            folder=LOGO_FOLDER,
            prefix=f"logo_{app_id or 'new'}",
            metadata={"type": "app_logo", "appId": app_id},
        )

    def upload_app_screenshots(
        self, files: list[UploadedFile], app_id: str | None, user_id: str
    ) -> MultiUploadResult:
        """Store app screenshots under ``apps/screenshots``."""
        return self.upload_files(
            files,
            user_id,
            folder=SCREENSHOT_FOLDER,
            prefix=f"screenshot_{app_id or 'new'}",
            metadata={"type": "app_screenshot", "appId": app_id},
        )

    def upload_slide_image(
        self, file: UploadedFile | None, slide_id: str | None, user_id: str
    ) -> UploadResult:
        """Store a hero slide image under ``slides``."""
        return self.upload_file(
            file,
            user_id,
            folder=SLIDE_FOLDER,
            prefix=f"slide_{slide_id or 'new'}",
            metadata={"type": "slide_image", "slideId": slide_id},
        )

    def delete_file(self, url: str, user: FirebaseUser) -> None:
        """Delete a stored object by public URL, with its metadata rows.

        Objects recorded as uploaded by someone else can only be deleted by
        an admin.

        Raises:
            InvalidArgumentError: If the URL does not point into storage
            UploadNotFoundError: If no object exists at that URL
            PermissionDeniedError: If another user uploaded the object
        """
        key = self.storage.key_from_url(url)
        if key is None:
            raise InvalidArgumentError("Invalid file URL")
        if not self.storage.exists(key):
            raise UploadNotFoundError(url)

        uploaders = self.uploads.uploaders_of(url)
        if uploaders and user.uid not in uploaders and not user.is_admin:
            raise PermissionDeniedError(
                "You do not have permission to delete this file"
            )

        self.storage.delete(key)
        removed = self.uploads.delete_by_url(url)
        logger.info("file_deleted", key=key, metadata_rows=removed, user_id=user.uid)

    def get_upload_stats(self, user_id: str) -> UploadStats:
        """Count and size of a user's uploads, with a per-MIME-type breakdown."""
        total_files = 0
        total_size = 0
        by_type: Counter[str] = Counter()
        for upload in self.uploads.list_for_user(user_id):
            total_files += 1
            total_size += upload.size or 0
            by_type[upload.mimetype or "unknown"] += 1

        return UploadStats(
            total_files=total_files,
            total_size=total_size,
            by_type=dict(by_type),
        )

    def _store(
        self,
        file: UploadedFile,
        folder: str,
        prefix: str,
        metadata: dict[str, Any],
    ) -> StoredObject:
        """Write one validated file to storage."""
        original_name = file.name or "upload"
        filename = generate_safe_filename(original_name, prefix)
        file.seek(0)
        key = self.storage.save(f"{folder}/{filename}", file.read())
        return StoredObject(
            key=key,
            filename=key.rsplit("/", 1)[-1],
            original_name=original_name,
            url=self.storage.url(key),
            mimetype=file.content_type,
            size=file.size,
            folder=folder,
            metadata=metadata,
        )

    def _discard(self, stored: list[StoredObject]) -> None:
        """Best-effort removal of objects written by a failed call."""
        for item in stored:
            try:
                self.storage.delete(item.key)
            except Exception as exc:
                logger.error(
                    "orphaned_upload_cleanup_failed", key=item.key, error=str(exc)
                )

    @staticmethod
    def _row_kwargs(stored: StoredObject, user_id: str) -> dict[str, Any]:
        return {
            "filename": stored.filename,
            "original_name": stored.original_name,
            "filepath": stored.key,
            "url": stored.url,
            "mimetype": stored.mimetype,
            "size": stored.size,
            "folder": stored.folder,
            "uploaded_by": user_id or "anonymous",
            "metadata": {k: v for k, v in stored.metadata.items() if v is not None},
        }


upload_service = UploadService()
