"""Clears the per-thread authenticated user once a request completes."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from catalog.auth.context import clear_current_user


class SecurityContextMiddleware:
    """Guarantee no principal leaks into the next request on this thread.

    The principal itself is stored by the token authentication classes when
    DRF authenticates the request; see ``catalog.auth.context``.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        clear_current_user()
        try:
            return self.get_response(request)
        finally:
            clear_current_user()
