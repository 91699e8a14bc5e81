"""Per-request access logging and timing."""

import time
from collections.abc import Callable

import structlog
from django.http import HttpRequest, HttpResponse

from catalog.constants import PROCESS_TIME_HEADER, SLOW_REQUEST_THRESHOLD

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware:
    """Log each request on arrival and on completion.

    The completion event carries the status code and duration. The duration
    is also returned to the client in ``X-Process-Time`` (seconds), and
    requests slower than SLOW_REQUEST_THRESHOLD are logged as warnings.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        start_time = time.perf_counter()
        logger.info(
            "Request started",
            method=request.method,
            path=request.path,
            user_agent=request.headers.get("user-agent", ""),
        )

        response = self.get_response(request)

        duration = time.perf_counter() - start_time
        response[PROCESS_TIME_HEADER] = f"{duration:.6f}"

        logger.info(
            "Request finished",
            method=request.method,
            path=request.path,
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        if duration > SLOW_REQUEST_THRESHOLD:
            logger.warning(
                "Slow request detected",
                method=request.method,
                path=request.path,
                duration_s=round(duration, 2),
                threshold_s=SLOW_REQUEST_THRESHOLD,
            )

        return response
