"""Component tests for the /api/uploads routes."""

from django.core.files.uploadedfile import SimpleUploadedFile

from catalog.models import Upload
from tests.base import BaseComponentTest

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def image(name: str = "photo.png", content_type: str = "image/png"):
    return SimpleUploadedFile(name, PNG_BYTES, content_type=content_type)


class UploadTestCase(BaseComponentTest):
    def upload(self, url: str, data: dict, headers: dict | None = None):
        """Send a multipart upload."""
        return self.client.post(url, data, headers=headers or {})

    def upload_one(self) -> str:
        response = self.upload(
            "/api/uploads/single", {"file": image()}, self.user_headers()
        )
        return response.json()["data"]["url"]


class TestSingleUploadEndpoint(UploadTestCase):
    def test_upload_stores_file_and_metadata(self):
        response = self.upload(
            "/api/uploads/single",
            {"file": image(), "folder": "avatars", "prefix": "me"},
            self.user_headers(),
        )

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["message"], "File uploaded successfully")
        data = body["data"]
        self.assertTrue(data["url"].startswith("http://testserver/media/avatars/me_"))
        self.assertTrue(data["filename"].endswith(".png"))
        self.assertEqual(data["originalName"], "photo.png")
        self.assertEqual(data["size"], len(PNG_BYTES))
        self.assertEqual(data["mimetype"], "image/png")

        upload = Upload.objects.get(id=data["id"])
        self.assertEqual(upload.uploaded_by, self.user_id)
        self.assertEqual(upload.folder, "avatars")

    def test_missing_file(self):
        response = self.upload("/api/uploads/single", {}, self.user_headers())

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "No file provided")

    def test_non_image_is_rejected(self):
        response = self.upload(
            "/api/uploads/single",
            {"file": image("notes.txt", "text/plain")},
            self.user_headers(),
        )

        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["error"].startswith("Invalid file type"))
        self.assertFalse(Upload.objects.exists())

    def test_folder_traversal_is_rejected(self):
        response = self.upload(
            "/api/uploads/single",
            {"file": image(), "folder": "../secrets"},
            self.user_headers(),
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["details"][0]["field"], "folder")

    def test_requires_token(self):
        response = self.upload("/api/uploads/single", {"file": image()})
        self.assertEqual(response.status_code, 401)


class TestMultipleUploadEndpoint(UploadTestCase):
    def test_uploads_every_file(self):
        response = self.upload(
            "/api/uploads/multiple",
            {"files": [image("a.png"), image("b.jpg", "image/jpeg")]},
            self.user_headers(),
        )

        self.assertEqual(response.status_code, 201)
        data = response.json()["data"]
        self.assertEqual(data["count"], 2)
        self.assertEqual(
            [item["originalName"] for item in data["uploads"]], ["a.png", "b.jpg"]
        )
        self.assertEqual(Upload.objects.count(), 2)

    def test_more_than_five_files(self):
        files = [image(f"{index}.png") for index in range(6)]

        response = self.upload(
            "/api/uploads/multiple", {"files": files}, self.user_headers()
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["error"], "Maximum 5 files allowed per upload"
        )
        self.assertFalse(Upload.objects.exists())

    def test_one_bad_file_stores_nothing(self):
        response = self.upload(
            "/api/uploads/multiple",
            {"files": [image("a.png"), image("b.pdf", "application/pdf")]},
            self.user_headers(),
        )

        self.assertEqual(response.status_code, 400)
        self.assertFalse(Upload.objects.exists())


class TestTypedUploadEndpoints(UploadTestCase):
    def test_logo(self):
        response = self.upload(
            "/api/uploads/logo",
            {"file": image(), "appId": "app1"},
            self.user_headers(),
        )

        self.assertEqual(response.status_code, 201)
        self.assertIn("/apps/logos/logo_app1_", response.json()["data"]["url"])

    def test_logo_missing(self):
        response = self.upload("/api/uploads/logo", {}, self.user_headers())
        self.assertEqual(response.json()["error"], "No logo file provided")

    def test_screenshots(self):
        response = self.upload(
            "/api/uploads/screenshots",
            {"files": [image("1.png"), image("2.png")]},
            self.user_headers(),
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["data"]["count"], 2)

    def test_screenshots_missing(self):
        response = self.upload("/api/uploads/screenshots", {}, self.user_headers())
        self.assertEqual(response.json()["error"], "No screenshot files provided")

    def test_slide_image_requires_admin(self):
        denied = self.upload(
            "/api/uploads/slide", {"file": image()}, self.user_headers()
        )
        allowed = self.upload(
            "/api/uploads/slide", {"file": image()}, self.admin_headers()
        )

        self.assertEqual(denied.status_code, 403)
        self.assertEqual(allowed.status_code, 201)
        self.assertIn("/slides/slide_new_", allowed.json()["data"]["url"])


class TestDeleteAndStatsEndpoints(UploadTestCase):
    def test_uploader_can_delete(self):
        url = self.upload_one()

        response = self.send_json(
            "DELETE", "/api/uploads", {"fileUrl": url}, self.user_headers()
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "File deleted successfully")
        self.assertFalse(Upload.objects.filter(url=url).exists())

        again = self.send_json(
            "DELETE", "/api/uploads", {"fileUrl": url}, self.user_headers()
        )
        self.assertEqual(again.status_code, 404)

    def test_other_user_cannot_delete(self):
        url = self.upload_one()

        response = self.send_json(
            "DELETE", "/api/uploads", {"fileUrl": url}, self.other_user_headers()
        )

        self.assertEqual(response.status_code, 403)
        self.assertTrue(Upload.objects.filter(url=url).exists())

    def test_admin_can_delete_any_file(self):
        url = self.upload_one()

        response = self.send_json(
            "DELETE", "/api/uploads", {"fileUrl": url}, self.admin_headers()
        )

        self.assertEqual(response.status_code, 200)

    def test_foreign_url_is_rejected(self):
        response = self.send_json(
            "DELETE",
            "/api/uploads",
            {"fileUrl": "https://elsewhere.example.com/a.png"},
            self.user_headers(),
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Invalid file URL")

    def test_stats(self):
        self.upload_one()
        self.upload(
            "/api/uploads/single",
            {"file": image("b.jpg", "image/jpeg")},
            self.user_headers(),
        )

        response = self.get_json("/api/uploads/stats", self.user_headers())

        self.assertEqual(
            response.json()["data"],
            {
                "totalFiles": 2,
                "totalSize": 2 * len(PNG_BYTES),
                "byType": {"image/png": 1, "image/jpeg": 1},
            },
        )
