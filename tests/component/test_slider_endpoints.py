"""Component tests for the /api/slider routes."""

from catalog.models import HeroSlide
from tests.base import BaseComponentTest
from tests.factories import create_app, create_slide


class SliderTestCase(BaseComponentTest):
    def setUp(self):
        """Three slides ordered a, b, c."""
        super().setUp()
        self.a = create_slide(0, title="A")
        self.b = create_slide(1, title="B")
        self.c = create_slide(2, title="C")

    def column(self, name: str) -> list:
        return list(HeroSlide.objects.order_by("order").values_list(name, flat=True))

    def titles(self) -> list[str]:
        return self.column("title")

    def orders(self) -> list[int]:
        return self.column("order")


class TestSliderReadEndpoints(SliderTestCase):
    def test_public_list_shows_active_slides_in_order(self):
        self.b.is_active = False
        self.b.save()

        response = self.get_json("/api/slider")

        body = response.json()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(body["count"], 2)
        self.assertEqual([slide["title"] for slide in body["data"]], ["A", "C"])

    def test_public_list_embeds_linked_app(self):
        app = create_app(app_name="Linked")
        self.a.app_id = app.id
        self.a.save()

        data = self.get_json("/api/slider").json()["data"]

        self.assertEqual(data[0]["app"]["appName"], "Linked")
        self.assertIsNone(data[1]["app"])

    def test_all_slides_requires_admin(self):
        self.assertEqual(self.get_json("/api/slider/all").status_code, 401)
        self.assertEqual(
            self.get_json("/api/slider/all", self.user_headers()).status_code, 403
        )
        response = self.get_json("/api/slider/all", self.admin_headers())
        self.assertEqual(response.json()["count"], 3)

    def test_get_missing_slide(self):
        response = self.get_json("/api/slider/missing", self.admin_headers())
        self.assertEqual(response.status_code, 404)


class TestSliderWriteEndpoints(SliderTestCase):
    def test_create_appends_by_default(self):
        response = self.send_json(
            "POST",
            "/api/slider",
            {"title": "D", "imageUrl": "https://example.com/d.png"},
            self.admin_headers(),
        )

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["message"], "Slide created successfully")
        self.assertEqual(body["data"]["order"], 3)
        self.assertEqual(body["data"]["buttonText"], "View App")
        self.assertEqual(self.titles(), ["A", "B", "C", "D"])

    def test_create_at_position_shifts_later_slides(self):
        self.send_json(
            "POST",
            "/api/slider",
            {"title": "D", "imageUrl": "https://example.com/d.png", "order": 1},
            self.admin_headers(),
        )

        self.assertEqual(self.titles(), ["A", "D", "B", "C"])
        self.assertEqual(self.orders(), [0, 1, 2, 3])

    def test_create_requires_admin(self):
        body = {"title": "D", "imageUrl": "https://example.com/d.png"}

        self.assertEqual(self.send_json("POST", "/api/slider", body).status_code, 401)
        response = self.send_json("POST", "/api/slider", body, self.user_headers())
        self.assertEqual(response.status_code, 403)
        self.assertEqual(HeroSlide.objects.count(), 3)

    def test_create_rejects_bad_image_url(self):
        response = self.send_json(
            "POST",
            "/api/slider",
            {"title": "D", "imageUrl": "ftp://example.com/d.png"},
            self.admin_headers(),
        )
        self.assertEqual(response.status_code, 400)

    def test_reorder(self):
        response = self.send_json(
            "POST",
            "/api/slider/reorder",
            {"slideIds": [self.c.id, self.a.id, self.b.id]},
            self.admin_headers(),
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Slides reordered successfully")
        self.assertEqual(response.json()["data"], {"count": 3})
        self.assertEqual(self.titles(), ["C", "A", "B"])

    def test_partial_reorder_appends_unlisted_slides(self):
        self.send_json(
            "POST",
            "/api/slider/reorder",
            {"slideIds": [self.c.id]},
            self.admin_headers(),
        )

        self.assertEqual(self.titles(), ["C", "A", "B"])
        self.assertEqual(self.orders(), [0, 1, 2])

    def test_reorder_with_unknown_id_changes_nothing(self):
        response = self.send_json(
            "POST",
            "/api/slider/reorder",
            {"slideIds": [self.c.id, "nope"]},
            self.admin_headers(),
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["details"], {"slideIds": ["nope"]})
        self.assertEqual(self.titles(), ["A", "B", "C"])

    def test_reorder_with_empty_list(self):
        response = self.send_json(
            "POST", "/api/slider/reorder", {"slideIds": []}, self.admin_headers()
        )
        self.assertEqual(response.status_code, 400)

    def test_move_returns_new_order(self):
        response = self.send_json(
            "POST",
            f"/api/slider/{self.a.id}/move",
            {"newIndex": 2},
            self.admin_headers(),
        )

        body = response.json()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(body["count"], 3)
        self.assertEqual([slide["title"] for slide in body["data"]], ["B", "C", "A"])
        self.assertEqual([slide["order"] for slide in body["data"]], [0, 1, 2])
        self.assertEqual(self.titles(), ["B", "C", "A"])

    def test_move_out_of_range_keeps_order(self):
        self.send_json(
            "POST",
            f"/api/slider/{self.a.id}/move",
            {"newIndex": 7},
            self.admin_headers(),
        )

        self.assertEqual(self.titles(), ["A", "B", "C"])

    def test_update_with_order_moves_slide(self):
        response = self.send_json(
            "PUT",
            f"/api/slider/{self.c.id}",
            {"title": "C2", "order": 0},
            self.admin_headers(),
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Slide updated successfully")
        self.assertEqual(self.titles(), ["C2", "A", "B"])

    def test_update_rejects_unknown_fields(self):
        response = self.send_json(
            "PUT",
            f"/api/slider/{self.c.id}",
            {"createdAt": "2020-01-01"},
            self.admin_headers(),
        )
        self.assertEqual(response.status_code, 400)

    def test_toggle(self):
        url = f"/api/slider/{self.b.id}/toggle"

        off = self.send_json("PATCH", url, None, self.admin_headers()).json()
        on = self.send_json("PATCH", url, None, self.admin_headers()).json()

        self.assertEqual(off["message"], "Slide deactivated successfully")
        self.assertFalse(off["data"]["isActive"])
        self.assertEqual(on["message"], "Slide activated successfully")
        self.assertTrue(on["data"]["isActive"])

    def test_delete_closes_the_gap(self):
        response = self.send_json(
            "DELETE", f"/api/slider/{self.a.id}", None, self.admin_headers()
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.titles(), ["B", "C"])
        self.assertEqual(self.orders(), [0, 1])

    def test_delete_missing_slide(self):
        response = self.send_json(
            "DELETE", "/api/slider/missing", None, self.admin_headers()
        )
        self.assertEqual(response.status_code, 404)
