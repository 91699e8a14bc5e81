"""Upload schemas."""

from catalog.schemas.upload.upload_request import DeleteFileRequest, UploadFormRequest
from catalog.schemas.upload.upload_response import (
    MultiUploadResult,
    UploadResult,
    UploadStats,
)

__all__ = [
    "DeleteFileRequest",
    "MultiUploadResult",
    "UploadFormRequest",
    "UploadResult",
    "UploadStats",
]
