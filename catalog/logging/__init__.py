"""Logging utilities for the UPlayG API."""

from catalog.logging.config import cleanup_old_logs, setup_logging
from catalog.logging.context import (
    clear_request_context,
    get_client_ip,
    get_request_id,
    set_client_ip,
    set_request_id,
)

__all__ = [
    "cleanup_old_logs",
    "clear_request_context",
    "get_client_ip",
    "get_request_id",
    "set_client_ip",
    "set_request_id",
    "setup_logging",
]
