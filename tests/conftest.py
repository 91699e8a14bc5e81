"""Pytest configuration and shared fixtures."""

import os

from django.test import Client

import pytest

# pytest-django reads the settings module from pyproject; set it for direct runs
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "uplayg.settings_test")


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def token_factory():
    """Provide a function that signs test ID tokens."""
    from tests.base import make_token  # noqa: PLC0415

    return make_token
