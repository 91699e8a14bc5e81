"""Rating routes under /api/ratings."""

from rest_framework import status

from catalog.schemas.rating import RatingListQuery, RatingRequest
from catalog.services.rating_service import rating_service
from catalog.views.base import SIGNED_IN, CatalogAPIView


class AppRatingsView(CatalogAPIView):
    """List, submit and withdraw ratings of one app."""

    method_permissions = {"POST": SIGNED_IN, "DELETE": SIGNED_IN}

    def get(self, request, app_id):
        """List ratings newest first.

        Query parameters: ``limit`` (1-100, default 50) and
        ``includeUserInfo`` to embed reviewer names and photos.
        """
        query = self.validate(RatingListQuery, request.query_params)
        ratings = rating_service.list_app_ratings(
            app_id, limit=query.limit, include_user_info=query.include_user_info
        )
        return self.success(ratings, count=len(ratings))

    def post(self, request, app_id):
        """Rate an app, replacing the caller's earlier rating if any.

        Returns:
            201 Created for a first rating
            200 OK when an existing rating was updated
            400 Bad Request if the rating is not an integer from 1 to 5
            401 Unauthorized without a valid token
            404 Not Found if the app does not exist
        """
        rating_request = self.validate(RatingRequest, request.data)
        result = rating_service.submit_rating(
            app_id,
            self.user_id(),
            rating_request.rating,
            rating_request.review,
        )
        if result.is_update:
            return self.success(result, message="Rating updated successfully")
        return self.success(
            result,
            status_code=status.HTTP_201_CREATED,
            message="Rating submitted successfully",
        )

    def delete(self, request, app_id):
        """Withdraw the caller's rating."""
        rating_service.delete_rating(app_id, self.user_id())
        return self.success(message="Rating deleted successfully")


class RatingSummaryView(CatalogAPIView):
    """Average, total and star distribution of an app's ratings."""

    def get(self, request, app_id):
        return self.success(rating_service.get_summary(app_id))


class MyRatingView(CatalogAPIView):
    """The caller's own rating of an app."""

    method_permissions = {"GET": SIGNED_IN}

    def get(self, request, app_id):
        rating = rating_service.get_user_rating(app_id, self.user_id())
        return self.success(rating, hasRated=rating is not None)


class HasRatedView(CatalogAPIView):
    method_permissions = {"GET": SIGNED_IN}

    def get(self, request, app_id):
        has_rated = rating_service.has_user_rated(app_id, self.user_id())
        return self.success(hasRated=has_rated)
