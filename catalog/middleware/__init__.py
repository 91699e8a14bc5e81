"""Middleware components for the UPlayG API."""

from catalog.middleware.rate_limit import RateLimitMiddleware
from catalog.middleware.request_id import RequestIDMiddleware
from catalog.middleware.request_logging import RequestLoggingMiddleware
from catalog.middleware.security_context import SecurityContextMiddleware
from catalog.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RateLimitMiddleware",
    "RequestIDMiddleware",
    "RequestLoggingMiddleware",
    "SecurityContextMiddleware",
    "SecurityHeadersMiddleware",
]
