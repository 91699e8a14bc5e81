"""Rating aggregation: per-user ratings and the app's running average."""

from decimal import ROUND_HALF_UP, Decimal

from django.db import transaction

import structlog

from catalog.exceptions import (
    AppNotFoundError,
    InvalidArgumentError,
    RatingNotFoundError,
)
from catalog.repositories import AppRepository, RatingRepository, UserRepository
from catalog.schemas.rating import (
    RatingResponse,
    RatingResult,
    RatingSummary,
    ReviewerInfo,
)

logger = structlog.get_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5
MAX_REVIEW_LENGTH = 500


def round_rating(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def average_rating(rating_sum: int, rating_count: int) -> float:
    """Displayed average for the given aggregates; 0 when there are none."""
    if rating_count <= 0:
        return 0.0
    return round_rating(rating_sum / rating_count)


class RatingService:
    """Maintains ratings and the aggregate fields stored on each app.

    Every mutation runs in one transaction that first locks the app row, so
    the rating row and ``rating``/``rating_count``/``rating_sum`` always
    change together and concurrent submissions for one app are serialized.
    """

    def __init__(
        self,
        app_repository: type[AppRepository] = AppRepository,
        rating_repository: type[RatingRepository] = RatingRepository,
        user_repository: type[UserRepository] = UserRepository,
    ) -> None:
        """Initialize the rating service.

        Args:
            app_repository: App table access
            rating_repository: Rating table access
            user_repository: User table access, for reviewer details
        """
        self.apps = app_repository
        self.ratings = rating_repository
        self.users = user_repository

    def submit_rating(
        self,
        app_id: str,
        user_id: str,
        value: int,
        review: str | None = None,
    ) -> RatingResult:
        """Create or replace ``user_id``'s rating of ``app_id``.

        An existing rating is updated in place: the sum moves by the
        difference between the new and old values and the count is
        unchanged. An empty review keeps the previous one.

        Args:
            app_id: Rated app
            user_id: Rating author
            value: Integer star value in [1, 5]
            review: Optional review text, at most 500 characters

        Returns:
            The stored rating, flagged with whether it replaced an earlier one

        Raises:
            InvalidArgumentError: If the value or review is out of range
            AppNotFoundError: If the app does not exist
        """
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not MIN_RATING <= value <= MAX_RATING
        ):
            raise InvalidArgumentError("Rating must be between 1 and 5")
        review = (review or "").strip()
        if len(review) > MAX_REVIEW_LENGTH:
            raise InvalidArgumentError("Review must be at most 500 characters")

        with transaction.atomic():
            app = self.apps.get_for_update(app_id)
            if app is None:
                raise AppNotFoundError(app_id)

            existing = self.ratings.get_for_user_for_update(app_id, user_id)
            if existing is not None:
                old_value = existing.rating
                existing.rating = value
                if review:
                    existing.review = review
                existing.save(update_fields=["rating", "review", "updated_at"])
                app.rating_sum = max(0, app.rating_sum + value - old_value)
                rating = existing
            else:
                rating = self.ratings.create(app_id, user_id, value, review)
                app.rating_count += 1
                app.rating_sum += value

            app.rating = average_rating(app.rating_sum, app.rating_count)
            app.save(
                update_fields=["rating", "rating_count", "rating_sum", "updated_at"]
            )

        is_update = existing is not None
        logger.info(
            "rating_submitted",
            app_id=app_id,
            user_id=user_id,
            rating=value,
            is_update=is_update,
            new_average=app.rating,
            rating_count=app.rating_count,
        )
        return RatingResult(
            **RatingResponse.model_validate(rating).model_dump(),
            is_update=is_update,
        )

    def delete_rating(self, app_id: str, user_id: str) -> None:
        """Remove ``user_id``'s rating of ``app_id`` and update the aggregates.

        The rating is removed even when the app itself no longer exists.

        Raises:
            RatingNotFoundError: If the user has not rated the app; the app
                is left untouched.
        """
        with transaction.atomic():
            app = self.apps.get_for_update(app_id)
            rating = self.ratings.get_for_user_for_update(app_id, user_id)
            if rating is None:
                raise RatingNotFoundError(app_id, user_id)

            value = rating.rating
            rating.delete()

            if app is not None:
                app.rating_count = max(0, app.rating_count - 1)
                app.rating_sum = max(0, app.rating_sum - value)
                app.rating = average_rating(app.rating_sum, app.rating_count)
                app.save(
                    update_fields=["rating", "rating_count", "rating_sum", "updated_at"]
                )

        logger.info(
            "rating_deleted",
            app_id=app_id,
            user_id=user_id,
            rating=value,
            app_exists=app is not None,
        )

    def get_summary(self, app_id: str) -> RatingSummary:
        """Recompute average, total and star distribution from the ratings."""
        distribution = {str(star): 0 for star in range(MIN_RATING, MAX_RATING + 1)}
        total = 0
        rating_sum = 0
        for value in self.ratings.values_for_app(app_id):
            if MIN_RATING <= value <= MAX_RATING:
                distribution[str(value)] += 1
                total += 1
                rating_sum += value

        return RatingSummary(
            average=average_rating(rating_sum, total),
            total=total,
            distribution=distribution,
        )

    def get_user_rating(self, app_id: str, user_id: str) -> RatingResponse | None:
        """Return the caller's rating of an app, or None."""
        rating = self.ratings.get_for_user(app_id, user_id)
        return RatingResponse.model_validate(rating) if rating else None

    def has_user_rated(self, app_id: str, user_id: str) -> bool:
        """Whether the caller has rated the app."""
        return self.ratings.exists_for_user(app_id, user_id)

    def list_app_ratings(
        self,
        app_id: str,
        limit: int = 50,
        include_user_info: bool = False,
    ) -> list[RatingResponse]:
        """List an app's ratings newest first.

        Args:
            app_id: Rated app
            limit: Maximum number of ratings
            include_user_info: Embed reviewer name and photo from profiles

        Returns:
            Ratings, each with ``user`` set when requested and known
        """
        ratings = [
            RatingResponse.model_validate(rating)
            for rating in self.ratings.list_for_app(app_id, limit)
        ]
        if not include_user_info or not ratings:
            return ratings

        users = self.users.get_users_by_ids([rating.user_id for rating in ratings])
        for rating in ratings:
            user = users.get(rating.user_id)
            if user is not None:
                rating.user = ReviewerInfo(
                    name=user.name or "Anonymous",
                    photo_url=user.photo_url or None,
                )
        return ratings


rating_service = RatingService()
