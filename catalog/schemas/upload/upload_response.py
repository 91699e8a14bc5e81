"""Response schemas for upload routes."""

from catalog.schemas.base_schema_model import BaseSchemaModel


class UploadResult(BaseSchemaModel):
    """A stored file and its public URL."""

    id: str
    url: str
    filename: str
    original_name: str
    size: int
    mimetype: str


class MultiUploadResult(BaseSchemaModel):
    """Files stored by one multi-file request."""

    uploads: list[UploadResult]
    count: int


class UploadStats(BaseSchemaModel):
    """Per-user upload totals."""

    total_files: int
    total_size: int
    by_type: dict[str, int]
