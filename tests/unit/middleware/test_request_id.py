"""Unit tests for RequestIDMiddleware."""

import unittest
import uuid

from django.http import HttpResponse
from django.test import RequestFactory

from catalog.constants import REQUEST_ID_HEADER
from catalog.logging.context import get_client_ip, get_request_id
from catalog.middleware.request_id import RequestIDMiddleware, get_client_ip as ip_of


class TestRequestIDMiddleware(unittest.TestCase):
    """Test cases for RequestIDMiddleware."""

    def setUp(self):
        """Set up test fixtures."""
        self.seen = {}

        def mock_get_response(request):
            self.seen["request_id"] = get_request_id()
            self.seen["client_ip"] = get_client_ip()
            return HttpResponse("OK")

        self.middleware = RequestIDMiddleware(mock_get_response)
        self.factory = RequestFactory()

    def test_generates_request_id_when_not_present(self):
        request = self.factory.get("/api/apps")

        response = self.middleware(request)

        uuid.UUID(request.request_id)
        self.assertEqual(response[REQUEST_ID_HEADER], request.request_id)

    def test_uses_existing_request_id(self):
        existing_id = str(uuid.uuid4())
        request = self.factory.get("/api/apps", HTTP_X_REQUEST_ID=existing_id)

        response = self.middleware(request)

        self.assertEqual(request.request_id, existing_id)
        self.assertEqual(response[REQUEST_ID_HEADER], existing_id)

    def test_context_is_set_during_request_and_cleared_after(self):
        request = self.factory.get("/api/apps", REMOTE_ADDR="198.51.100.7")

        self.middleware(request)

        self.assertEqual(self.seen["request_id"], request.request_id)
        self.assertEqual(self.seen["client_ip"], "198.51.100.7")
        self.assertIsNone(get_request_id())
        self.assertIsNone(get_client_ip())


class TestGetClientIp(unittest.TestCase):
    """Tests for the client address helper."""

    def setUp(self):
        """Set up test fixtures."""
        self.factory = RequestFactory()

    def test_remote_addr(self):
        request = self.factory.get("/", REMOTE_ADDR="127.0.0.1")
        self.assertEqual(ip_of(request), "127.0.0.1")

    def test_first_forwarded_address_wins(self):
        request = self.factory.get(
            "/", HTTP_X_FORWARDED_FOR="203.0.113.1, 198.51.100.1"
        )
        self.assertEqual(ip_of(request), "203.0.113.1")


if __name__ == "__main__":
    unittest.main()
