"""Per-request context (request id, client address) kept in thread-local storage.

Gunicorn runs each request on a single worker thread, so values stored here are
visible to every log call made while serving that request.
"""

import threading

_request_context = threading.local()


def set_request_id(request_id: str) -> None:
    """Store the request ID for the current thread."""
    _request_context.request_id = request_id


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return getattr(_request_context, "request_id", None)


def set_client_ip(client_ip: str) -> None:
    """Store the caller's address for the current thread."""
    _request_context.client_ip = client_ip


def get_client_ip() -> str | None:
    """Return the caller's address, or None outside a request."""
    return getattr(_request_context, "client_ip", None)


def clear_request_context() -> None:
    """Drop everything stored for the current request.

    Must run once the response is produced so values do not bleed into the
    next request served by the same thread.
    """
    for attr in ("request_id", "client_ip"):
        if hasattr(_request_context, attr):
            delattr(_request_context, attr)
