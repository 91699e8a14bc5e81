"""Unit tests for ObjectStorage."""

import unittest

from django.core.files.storage import InMemoryStorage

from catalog.services.storage import ObjectStorage


class TestObjectStorage(unittest.TestCase):
    """Tests for the storage wrapper."""

    def setUp(self):
        """Set up test fixtures."""
        self.storage = ObjectStorage(InMemoryStorage(base_url="http://cdn.test/media/"))

    def test_save_exists_url_delete(self):
        key = self.storage.save("uploads/a.png", b"data")

        self.assertEqual(key, "uploads/a.png")
        self.assertTrue(self.storage.exists(key))
        self.assertEqual(self.storage.url(key), "http://cdn.test/media/uploads/a.png")

        self.storage.delete(key)
        self.assertFalse(self.storage.exists(key))

    def test_key_from_url_round_trips_public_urls(self):
        key = self.storage.save("apps/logos/logo.png", b"data")

        self.assertEqual(self.storage.key_from_url(self.storage.url(key)), key)

    def test_key_from_url_ignores_query_and_decodes(self):
        self.assertEqual(
            self.storage.key_from_url("http://cdn.test/media/a%20b.png?v=2"),
            "a b.png",
        )

    def test_key_from_url_rejects_outside_urls(self):
        for url in (
            "http://other.test/media/a.png",
            "http://cdn.test/media/",
            "http://cdn.test/media/folder/",
            "http://cdn.test/media/../etc/passwd",
            "http://cdn.test/media/a/./b.png",
        ):
            with self.subTest(url=url):
                self.assertIsNone(self.storage.key_from_url(url))
