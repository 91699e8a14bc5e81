"""Unit tests for SliderService ordering."""

from catalog.enums import AppStatus
from catalog.exceptions import InvalidArgumentError, SlideNotFoundError
from catalog.models import HeroSlide
from catalog.schemas.slide import SlideCreateRequest, SlideUpdateRequest
from catalog.services.slider_service import SliderService
from tests.base import BaseUnitTest
from tests.factories import create_app, create_slide


class TestSliderService(BaseUnitTest):
    """Tests for slide ordering operations."""

    def setUp(self):
        """Set up three slides A, B, C at orders 0..2."""
        super().setUp()
        self.service = SliderService()
        self.a = create_slide(0, title="A")
        self.b = create_slide(1, title="B")
        self.c = create_slide(2, title="C")

    def titles(self) -> list[str]:
        return list(HeroSlide.objects.order_by("order").values_list("title", flat=True))

    def assert_dense(self):
        orders = list(
            HeroSlide.objects.order_by("order").values_list("order", flat=True)
        )
        self.assertEqual(orders, list(range(len(orders))))

    def _create_request(self, title, **fields):
        return SlideCreateRequest(
            title=title, image_url="https://example.com/slide.png", **fields
        )

    def test_create_appends_at_end(self):
        slide = self.service.create_slide(self._create_request("D"))

        self.assertEqual(slide.order, 3)
        self.assertEqual(self.titles(), ["A", "B", "C", "D"])
        self.assert_dense()

    def test_create_with_order_inserts_and_shifts(self):
        slide = self.service.create_slide(self._create_request("D", order=1))

        self.assertEqual(slide.order, 1)
        self.assertEqual(self.titles(), ["A", "D", "B", "C"])
        self.assert_dense()

    def test_create_with_order_past_end_is_clamped(self):
        slide = self.service.create_slide(self._create_request("D", order=40))

        self.assertEqual(slide.order, 3)
        self.assert_dense()

    def test_delete_closes_gap(self):
        self.service.delete_slide(self.b.id)

        self.assertEqual(self.titles(), ["A", "C"])
        self.assert_dense()

    def test_delete_missing_slide(self):
        with self.assertRaises(SlideNotFoundError):
            self.service.delete_slide("missing")

    def test_move_forward_and_back(self):
        ordered = self.service.move_slide(self.a.id, 2)

        self.assertEqual([s.title for s in ordered], ["B", "C", "A"])
        self.assertEqual(self.titles(), ["B", "C", "A"])

        self.service.move_slide(self.a.id, 0)
        self.assertEqual(self.titles(), ["A", "B", "C"])
        self.assert_dense()

    def test_move_out_of_range_changes_nothing(self):
        for index in (-1, 3, 99):
            with self.subTest(index=index):
                ordered = self.service.move_slide(self.b.id, index)
                self.assertEqual([s.title for s in ordered], ["A", "B", "C"])
                self.assertEqual(self.titles(), ["A", "B", "C"])

    def test_move_missing_slide(self):
        with self.assertRaises(SlideNotFoundError):
            self.service.move_slide("missing", 0)

    def test_reorder_full_permutation(self):
        result = self.service.reorder([self.c.id, self.a.id, self.b.id])

        self.assertEqual(result.count, 3)
        self.assertEqual(self.titles(), ["C", "A", "B"])
        self.assert_dense()

    def test_partial_reorder_keeps_unlisted_slides_after(self):
        self.service.reorder([self.c.id])

        self.assertEqual(self.titles(), ["C", "A", "B"])
        self.assert_dense()

    def test_reorder_rejects_bad_input_without_writing(self):
        cases = [
            [],
            [self.a.id, self.a.id],
            [self.a.id, "missing"],
        ]
        for ids in cases:
            with self.subTest(ids=ids), self.assertRaises(InvalidArgumentError):
                self.service.reorder(ids)
        self.assertEqual(self.titles(), ["A", "B", "C"])

    def test_reorder_reports_unknown_ids(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            self.service.reorder(["nope"])
        self.assertEqual(ctx.exception.details, {"slideIds": ["nope"]})

    def test_update_with_order_moves_slide(self):
        slide = self.service.update_slide(
            self.c.id, SlideUpdateRequest(title="C2", order=0)
        )

        self.assertEqual(slide.title, "C2")
        self.assertEqual(slide.order, 0)
        self.assertEqual(self.titles(), ["C2", "A", "B"])

    def test_update_can_unlink_app(self):
        HeroSlide.objects.filter(id=self.a.id).update(app_id="app-1")

        self.service.update_slide(self.a.id, SlideUpdateRequest(app_id=""))

        self.assertIsNone(HeroSlide.objects.get(id=self.a.id).app_id)

    def test_toggle_flips_visibility(self):
        self.assertFalse(self.service.toggle_active(self.a.id).is_active)
        self.assertTrue(self.service.toggle_active(self.a.id).is_active)

    def test_list_active_embeds_only_active_linked_apps(self):
        active_app = create_app(app_name="Catify", status=AppStatus.ACTIVE.value)
        draft_app = create_app(status=AppStatus.DRAFT.value)
        HeroSlide.objects.filter(id=self.a.id).update(app_id=active_app.id)
        HeroSlide.objects.filter(id=self.b.id).update(app_id=draft_app.id)
        HeroSlide.objects.filter(id=self.c.id).update(is_active=False)

        slides = self.service.list_active()

        self.assertEqual([s.title for s in slides], ["A", "B"])
        self.assertEqual(slides[0].app.app_name, "Catify")
        self.assertIsNone(slides[1].app)
