"""Request schemas for upload routes."""

import re

from pydantic import Field, field_validator

from catalog.constants.uploads import DEFAULT_UPLOAD_FOLDER
from catalog.schemas.base_schema_model import BaseSchemaModel

FOLDER_PATTERN = re.compile(r"^[a-zA-Z0-9_\-]+(/[a-zA-Z0-9_\-]+)*$")
PREFIX_PATTERN = re.compile(r"^[a-zA-Z0-9_\-]*$")


class UploadFormRequest(BaseSchemaModel):
    """Form fields sent alongside multipart uploads."""

    folder: str = DEFAULT_UPLOAD_FOLDER
    prefix: str = Field("", max_length=60)
    app_id: str | None = None
    slide_id: str | None = None

    @field_validator("folder")
    @classmethod
    def check_folder(cls, value: str) -> str:
        value = value.strip("/") or DEFAULT_UPLOAD_FOLDER
        if not FOLDER_PATTERN.match(value):
            raise ValueError("Folder may only contain letters, digits, - _ and /")
        return value

    @field_validator("prefix")
    @classmethod
    def check_prefix(cls, value: str) -> str:
        if not PREFIX_PATTERN.match(value):
            raise ValueError("Prefix may only contain letters, digits, - and _")
        return value


class DeleteFileRequest(BaseSchemaModel):
    """Body of DELETE /api/uploads."""

    file_url: str = Field(..., min_length=1)
