"""Pydantic schemas for API requests and responses."""

from catalog.schemas.base_schema_model import (
    BaseSchemaModel,
    StrictUpdateModel,
    format_validation_errors,
)

__all__ = ["BaseSchemaModel", "StrictUpdateModel", "format_validation_errors"]
