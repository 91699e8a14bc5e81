"""Static security headers added to every response."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from catalog.constants import SECURITY_HEADERS


class SecurityHeadersMiddleware:
    """Add the SECURITY_HEADERS set (HSTS, CSP, frame and sniffing guards)."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)
        for header, value in SECURITY_HEADERS.items():
            response.setdefault(header, value)
        return response
