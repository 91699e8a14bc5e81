"""Liveness responses for the root and /health routes."""

from django.conf import settings
from django.utils import timezone

from catalog.schemas.health import HealthResponse, ServiceInfoResponse

SERVICE_DISPLAY_NAME = "UPlayG API"


class HealthService:
    """Builds liveness payloads; no dependency checks are made."""

    def get_service_info(self) -> ServiceInfoResponse:
        """Root ping payload."""
        return ServiceInfoResponse(service=SERVICE_DISPLAY_NAME, status="running")

    def get_liveness_status(self) -> HealthResponse:
        """Health check payload with the current time and environment."""
        return HealthResponse(
            status="healthy",
            timestamp=timezone.now(),
            environment=settings.ENVIRONMENT,
        )


health_service = HealthService()
