"""Token-bucket rate limiting keyed by client address and route group."""

import logging
import time
from collections.abc import Callable
from typing import Any

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse, JsonResponse

from catalog.constants import DEFAULT_RATE_LIMIT_REQUESTS, DEFAULT_RATE_LIMIT_WINDOW
from catalog.middleware.request_id import get_client_ip

logger = logging.getLogger(__name__)


class RateLimitMiddleware:
    """Enforce per-client request budgets using a token bucket in the cache.

    ``settings.RATE_LIMIT_RULES`` is an ordered list of
    ``{"prefix", "requests", "window"}`` dicts; the first rule whose prefix
    matches the request path applies, so upload routes can carry a tighter
    budget than the rest of the API. Each (rule, client) pair has its own
    bucket holding up to ``requests`` tokens that refill over ``window``
    seconds.

    If the cache backend fails the request is allowed and the failure logged.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response
        self.enabled = getattr(settings, "RATE_LIMIT_ENABLED", True)
        self.rules: list[dict[str, Any]] = getattr(
            settings,
            "RATE_LIMIT_RULES",
            [
                {
                    "prefix": "/",
                    "requests": DEFAULT_RATE_LIMIT_REQUESTS,
                    "window": DEFAULT_RATE_LIMIT_WINDOW,
                }
            ],
        )

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if not self.enabled or request.method == "OPTIONS":
            return self.get_response(request)

        rule = self._match_rule(request.path)
        if rule is None:
            return self.get_response(request)

        client_ip = getattr(request, "client_ip", None) or get_client_ip(request)
        allowed, retry_after = self._check_rate_limit(client_ip, rule)

        if not allowed:
            logger.warning(
                f"Rate limit exceeded for IP {client_ip} on {rule['prefix']}"
            )
            return JsonResponse(
                {
                    "success": False,
                    "error": "Too many requests, please try again later.",
                    "request_id": getattr(request, "request_id", None),
                    "retry_after": retry_after,
                },
                status=429,
                headers={"Retry-After": str(retry_after)},
            )

        return self.get_response(request)

    def _match_rule(self, path: str) -> dict[str, Any] | None:
        for rule in self.rules:
            if path.startswith(rule["prefix"]):
                return rule
        return None

    def _check_rate_limit(
        self, client_ip: str, rule: dict[str, Any]
    ) -> tuple[bool, int]:
        """Consume one token from the client's bucket for this rule.

        Returns:
            Tuple of (allowed, retry_after_seconds).
        """
        max_requests = rule["requests"]
        window = rule["window"]
        cache_key = f"rate_limit:{rule['prefix']}:{client_ip}"

        try:
            bucket = cache.get(cache_key)
            now = time.time()

            if bucket is None:
                tokens = max_requests - 1
            else:
                tokens, last_refill = bucket
                refill = (now - last_refill) / window * max_requests
                tokens = min(max_requests, tokens + refill)
                if tokens < 1:
                    retry_after = int((1 - tokens) / max_requests * window)
                    return False, max(1, retry_after)
                tokens -= 1

            cache.set(cache_key, (tokens, now), timeout=window * 2)
            return True, 0

        except Exception as e:
            logger.error(f"Rate limit check failed for {client_ip}: {e}")
            return True, 0
