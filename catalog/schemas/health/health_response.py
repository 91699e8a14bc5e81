"""Liveness response schemas."""

from datetime import datetime

from pydantic import Field

from catalog.schemas.base_schema_model import BaseSchemaModel


class ServiceInfoResponse(BaseSchemaModel):
    """Body of GET /."""

    success: bool = True
    service: str = Field(..., description="Service display name")
    status: str = Field(..., description="Process state")


class HealthResponse(BaseSchemaModel):
    """Body of GET /health."""

    success: bool = True
    status: str = Field(..., description="Liveness status")
    timestamp: datetime
    environment: str
