"""Request correlation: X-Request-ID and client address for every request."""

import logging
import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from catalog.constants import REQUEST_ID_HEADER
from catalog.logging.context import (
    clear_request_context,
    set_client_ip,
    set_request_id,
)

logger = logging.getLogger(__name__)


def get_client_ip(request: HttpRequest) -> str:
    """Return the originating client address, honoring X-Forwarded-For."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return str(request.META.get("REMOTE_ADDR", "unknown"))


class RequestIDMiddleware:
    """Attach a request id to the request, the log context and the response.

    An incoming ``X-Request-ID`` header is reused so that traces from the
    frontend can be followed through the API logs; otherwise a UUID4 is
    generated. Thread-local context is cleared once the response is built.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        client_ip = get_client_ip(request)

        set_request_id(request_id)
        set_client_ip(client_ip)
        request.request_id = request_id  # type: ignore[attr-defined]
        request.client_ip = client_ip  # type: ignore[attr-defined]

        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_request_context()
