"""Base test classes and request helpers."""

import json
import time
import uuid

from django.conf import settings
from django.core.cache import cache
from django.test import Client, TestCase

import jwt

from catalog.enums import UserRole
from catalog.models import User


def make_token(uid: str, expires_in: int = 3600, **claims) -> str:
    """Sign an ID token the way the test settings verify it (HS256)."""
    now = int(time.time())
    payload = {
        "sub": uid,
        "user_id": uid,
        "aud": settings.AUTH_JWT_AUDIENCE,
        "iss": settings.AUTH_JWT_ISSUER,
        "iat": now,
        "exp": now + expires_in,
        "email": f"{uid}@example.com",
        **claims,
    }
    return jwt.encode(payload, settings.AUTH_JWT_SECRET, algorithm="HS256")


def auth_headers(uid: str, **claims) -> dict[str, str]:
    """Authorization header for a signed-in user."""
    return {"Authorization": f"Bearer {make_token(uid, **claims)}"}


class BaseUnitTest(TestCase):
    """Base class for unit tests.

    The cache is cleared before each test so admin-role lookups and rate
    limit buckets never leak between tests.
    """

    def setUp(self):
        """Set up test fixtures."""
        cache.clear()


class BaseComponentTest(BaseUnitTest):
    """Base class for tests that go through the full request cycle.

    Provides a regular user and an admin, with header helpers for each.
    """

    def setUp(self):
        """Create the standard callers."""
        super().setUp()
        self.client = Client()
        self.user_id = f"user-{uuid.uuid4().hex[:8]}"
        self.other_user_id = f"other-{uuid.uuid4().hex[:8]}"
        self.admin_id = f"admin-{uuid.uuid4().hex[:8]}"
        User.objects.create(
            id=self.admin_id,
            email="admin@example.com",
            name="Admin",
            role=UserRole.ADMIN.value,
        )

    def user_headers(self) -> dict[str, str]:
        return auth_headers(self.user_id)

    def other_user_headers(self) -> dict[str, str]:
        return auth_headers(self.other_user_id)

    def admin_headers(self) -> dict[str, str]:
        return auth_headers(self.admin_id)

    def get_json(self, url: str, headers: dict | None = None, **params):
        return self.client.get(url, data=params or None, headers=headers or {})

    def send_json(self, method: str, url: str, body=None, headers: dict | None = None):
        """Send a JSON body with any HTTP method."""
        return self.client.generic(
            method,
            url,
            data="" if body is None else json.dumps(body),
            content_type="application/json",
            headers=headers or {},
        )
