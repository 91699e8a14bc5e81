"""Global exception handlers for the UPlayG API."""

import logging
import traceback
from typing import Any

from django.conf import settings
from django.core.exceptions import SuspiciousOperation
from django.http import Http404, HttpRequest, JsonResponse

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from catalog.constants import REQUEST_ID_HEADER
from catalog.exceptions.catalog_exceptions import CatalogError
from catalog.logging.context import get_request_id

logger = logging.getLogger(__name__)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Converts domain, DRF and Django exceptions into the API error envelope
    ``{"success": false, "error": str, "details"?: any}`` and logs each one
    with enough request information to troubleshoot it.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else context.get("request")
    request_id = get_request_id()

    if isinstance(exc, CatalogError):
        response = Response(
            create_error_response(exc.message, exc.details, request_id),
            status=exc.status_code,
        )
    else:
        # DRF also maps Django's Http404 and PermissionDenied
        response = exception_handler(exc, context)
        if response is not None:
            message, details = _unpack_drf_detail(response.data)
            response.data = create_error_response(message, details, request_id)
        elif isinstance(exc, SuspiciousOperation):
            response = Response(
                create_error_response(str(exc) or "Bad request", None, request_id),
                status=status.HTTP_400_BAD_REQUEST,
            )
        else:
            # Unhandled exception - message suppressed outside DEBUG
            message = str(exc) if settings.DEBUG else "Internal server error"
            response = Response(
                create_error_response(message, None, request_id),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    if request_id:
        response[REQUEST_ID_HEADER] = request_id

    _log_exception(exc, request, response)

    return response


def create_error_response(
    message: str, details: Any | None, request_id: str | None
) -> dict[str, Any]:
    """Create a standardized error response body.

    Args:
        message: The error message to return to the client.
        details: Optional structured details.
        request_id: The request ID for tracing.

    Returns:
        Dictionary with the standard error envelope.
    """
    body: dict[str, Any] = {"success": False, "error": message}
    if details is not None:
        body["details"] = details
    if request_id:
        body["request_id"] = request_id
    return body


def json_not_found(request: HttpRequest, exception: Exception | None = None):
    """Return the JSON 404 envelope for unmatched routes."""
    del exception
    return JsonResponse(
        {
            "success": False,
            "error": "Resource not found",
            "path": request.path,
            "method": request.method,
        },
        status=status.HTTP_404_NOT_FOUND,
    )


def json_server_error(request: HttpRequest):
    """Return the JSON 500 envelope for errors raised outside DRF views."""
    del request
    return JsonResponse(
        {"success": False, "error": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _unpack_drf_detail(data: Any) -> tuple[str, Any | None]:
    """Split DRF's response data into a message and optional details."""
    if isinstance(data, dict) and set(data) == {"detail"}:
        return str(data["detail"]), None
    if isinstance(data, list) and len(data) == 1:
        return str(data[0]), None
    return "Validation failed", data


def _log_exception(
    exc: Exception,
    request: Any,
    response: Response | None,
) -> None:
    """Log detailed exception information for troubleshooting.

    In DEBUG mode, logs include stack traces.
    In production, logs are more concise but still informative.

    Args:
        exc: The exception that was raised.
        request: The HTTP request object.
        response: The response object (if available).
    """
    status_code = response.status_code if response else 500
    if isinstance(exc, (Http404, APIException, CatalogError)) and status_code < 500:
        log_level = logging.WARNING
    else:
        log_level = logging.ERROR

    error_type = type(exc).__name__
    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {error_type}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

    if request and settings.DEBUG:
        log_message += f"\nRequest details: {_get_request_details(request)}"

    logger.log(log_level, log_message)


def _get_request_details(request: Any) -> str:
    """Extract relevant request details for logging.

    Args:
        request: The HTTP request object.

    Returns:
        String with formatted request details.
    """
    details = {
        "method": request.method,
        "path": request.path,
        "user": getattr(request, "user", "anonymous"),
        "ip": request.META.get("REMOTE_ADDR", "unknown"),
    }

    if request.GET:
        details["query_params"] = dict(request.GET)

    return str(details)
