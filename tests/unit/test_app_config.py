"""Unit tests for the catalog app configuration."""

import unittest
from unittest.mock import patch

from django.apps import apps
from django.test import SimpleTestCase, override_settings

from catalog.apps import CatalogConfig


class TestCatalogConfig(SimpleTestCase):
    """Tests for CatalogConfig."""

    def test_app_is_installed(self):
        self.assertIsInstance(apps.get_app_config("catalog"), CatalogConfig)

    def test_default_auto_field(self):
        self.assertEqual(
            CatalogConfig.default_auto_field, "django.db.models.BigAutoField"
        )

    @override_settings(STRUCTLOG_ENABLED=True)
    @patch("catalog.apps.structlog.configure")
    @patch("catalog.apps.setup_logging")
    def test_ready_sets_up_structured_logging(self, mock_setup, mock_configure):
        apps.get_app_config("catalog").ready()

        mock_setup.assert_called_once_with()
        mock_configure.assert_not_called()

    @override_settings(STRUCTLOG_ENABLED=False)
    @patch("catalog.apps.structlog.configure")
    @patch("catalog.apps.setup_logging")
    def test_ready_routes_structlog_through_stdlib(self, mock_setup, mock_configure):
        apps.get_app_config("catalog").ready()

        mock_setup.assert_not_called()
        mock_configure.assert_called_once()


if __name__ == "__main__":
    unittest.main()
