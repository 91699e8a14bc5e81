"""Rating schemas."""

from catalog.schemas.rating.rating_request import RatingListQuery, RatingRequest
from catalog.schemas.rating.rating_response import (
    RatingResponse,
    RatingResult,
    RatingSummary,
    ReviewerInfo,
)

__all__ = [
    "RatingListQuery",
    "RatingRequest",
    "RatingResponse",
    "RatingResult",
    "RatingSummary",
    "ReviewerInfo",
]
