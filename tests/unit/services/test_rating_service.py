"""Unit tests for RatingService aggregate maintenance."""

from catalog.exceptions import (
    AppNotFoundError,
    InvalidArgumentError,
    RatingNotFoundError,
)
from catalog.models import App, Rating
from catalog.services.rating_service import RatingService
from tests.base import BaseUnitTest
from tests.factories import create_app, create_rating, create_user


class TestRatingService(BaseUnitTest):
    """Tests for submit, delete and read operations."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        self.service = RatingService()
        self.app = create_app()

    def _reload(self) -> App:
        return App.objects.get(id=self.app.id)

    def assert_aggregates(self, rating: float, count: int, total: int):
        app = self._reload()
        self.assertEqual(app.rating, rating)
        self.assertEqual(app.rating_count, count)
        self.assertEqual(app.rating_sum, total)

    def test_first_rating_creates_row_and_aggregates(self):
        result = self.service.submit_rating(self.app.id, "u1", 4, "Nice")

        self.assertFalse(result.is_update)
        self.assertEqual(result.rating, 4)
        self.assertEqual(result.review, "Nice")
        self.assert_aggregates(4.0, 1, 4)

    def test_second_user_updates_average(self):
        self.service.submit_rating(self.app.id, "u1", 5)
        self.service.submit_rating(self.app.id, "u2", 2)

        self.assert_aggregates(3.5, 2, 7)

    def test_resubmission_replaces_value_without_changing_count(self):
        self.service.submit_rating(self.app.id, "u1", 5)
        self.service.submit_rating(self.app.id, "u2", 3)

        result = self.service.submit_rating(self.app.id, "u1", 1)

        self.assertTrue(result.is_update)
        self.assertEqual(Rating.objects.filter(app_id=self.app.id).count(), 2)
        self.assert_aggregates(2.0, 2, 4)

    def test_resubmission_with_empty_review_keeps_previous_review(self):
        self.service.submit_rating(self.app.id, "u1", 5, "Loved it")
        self.service.submit_rating(self.app.id, "u1", 4, "")

        rating = Rating.objects.get(app_id=self.app.id, user_id="u1")
        self.assertEqual(rating.review, "Loved it")
        self.assertEqual(rating.rating, 4)

    def test_three_ratings_then_delete(self):
        self.service.submit_rating(self.app.id, "u1", 5)
        self.service.submit_rating(self.app.id, "u2", 3)
        self.service.submit_rating(self.app.id, "u3", 1)
        self.assert_aggregates(3.0, 3, 9)

        self.service.delete_rating(self.app.id, "u3")

        self.assert_aggregates(4.0, 2, 8)

    def test_sum_eight_over_three_rounds_then_deletion_gives_half(self):
        for user_id, value in (("u1", 3), ("u2", 3), ("u3", 2)):
            self.service.submit_rating(self.app.id, user_id, value)
        self.assert_aggregates(2.7, 3, 8)

        self.service.delete_rating(self.app.id, "u1")

        self.assert_aggregates(2.5, 2, 5)

    def test_deleting_last_rating_resets_to_zero(self):
        self.service.submit_rating(self.app.id, "u1", 4)
        self.service.delete_rating(self.app.id, "u1")

        self.assert_aggregates(0.0, 0, 0)

    def test_out_of_range_values_are_rejected_before_any_write(self):
        for value in (0, 6, -1, True, 4.5, "5"):
            with self.subTest(value=value), self.assertRaises(InvalidArgumentError):
                self.service.submit_rating(self.app.id, "u1", value)

        self.assertFalse(Rating.objects.exists())
        self.assert_aggregates(0.0, 0, 0)

    def test_review_longer_than_500_is_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            self.service.submit_rating(self.app.id, "u1", 4, "x" * 501)

    def test_rating_unknown_app_raises_not_found(self):
        with self.assertRaises(AppNotFoundError):
            self.service.submit_rating("missing", "u1", 4)
        self.assertFalse(Rating.objects.exists())

    def test_deleting_missing_rating_leaves_app_untouched(self):
        self.service.submit_rating(self.app.id, "u1", 4)
        before = self._reload()

        with self.assertRaises(RatingNotFoundError):
            self.service.delete_rating(self.app.id, "nobody")

        after = self._reload()
        self.assertEqual(after.rating_count, 1)
        self.assertEqual(after.rating_sum, 4)
        self.assertEqual(after.updated_at, before.updated_at)

    def test_rating_of_deleted_app_can_still_be_removed(self):
        app_id = self.app.id
        create_rating(self.app, "u1", 5)
        self.app.delete()

        self.service.delete_rating(app_id, "u1")

        self.assertFalse(Rating.objects.exists())

    def test_summary_recomputes_from_rows(self):
        for user_id, value in (("u1", 5), ("u2", 5), ("u3", 2)):
            create_rating(self.app, user_id, value)

        summary = self.service.get_summary(self.app.id)

        self.assertEqual(summary.total, 3)
        self.assertEqual(summary.average, 4.0)
        self.assertEqual(
            summary.distribution, {"1": 0, "2": 1, "3": 0, "4": 0, "5": 2}
        )

    def test_summary_of_unrated_app(self):
        summary = self.service.get_summary(self.app.id)
        self.assertEqual(summary.average, 0.0)
        self.assertEqual(summary.total, 0)

    def test_user_rating_lookups(self):
        self.assertIsNone(self.service.get_user_rating(self.app.id, "u1"))
        self.assertFalse(self.service.has_user_rated(self.app.id, "u1"))

        create_rating(self.app, "u1", 3)

        self.assertEqual(self.service.get_user_rating(self.app.id, "u1").rating, 3)
        self.assertTrue(self.service.has_user_rated(self.app.id, "u1"))

    def test_list_embeds_reviewer_info_on_request(self):
        create_user("u1", name="Ada", photo_url="https://example.com/ada.png")
        create_rating(self.app, "u1", 5, "Great")
        create_rating(self.app, "ghost", 3)

        plain = self.service.list_app_ratings(self.app.id)
        detailed = self.service.list_app_ratings(self.app.id, include_user_info=True)

        self.assertTrue(all(rating.user is None for rating in plain))
        by_user = {rating.user_id: rating for rating in detailed}
        self.assertEqual(by_user["u1"].user.name, "Ada")
        self.assertIsNone(by_user["ghost"].user)

    def test_list_respects_limit(self):
        for index in range(5):
            create_rating(self.app, f"u{index}", 4)

        self.assertEqual(len(self.service.list_app_ratings(self.app.id, limit=2)), 2)
