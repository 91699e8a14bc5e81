"""Hero slider schemas."""

from catalog.schemas.slide.slide_request import (
    SlideCreateRequest,
    SlideMoveRequest,
    SlideReorderRequest,
    SlideUpdateRequest,
)
from catalog.schemas.slide.slide_response import (
    ReorderResult,
    SlideAppSummary,
    SlideResponse,
    SlideToggleResponse,
)

__all__ = [
    "ReorderResult",
    "SlideAppSummary",
    "SlideCreateRequest",
    "SlideMoveRequest",
    "SlideReorderRequest",
    "SlideResponse",
    "SlideToggleResponse",
    "SlideUpdateRequest",
]
