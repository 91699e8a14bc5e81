"""Health check schemas."""

from catalog.schemas.health.health_response import HealthResponse, ServiceInfoResponse

__all__ = ["HealthResponse", "ServiceInfoResponse"]
