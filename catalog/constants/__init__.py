"""Constants package for the catalog application."""

from catalog.constants.categories import CATEGORIES, CATEGORIES_BY_ID
from catalog.constants.http import (
    DEFAULT_RATE_LIMIT_REQUESTS,
    DEFAULT_RATE_LIMIT_WINDOW,
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SECURITY_HEADERS,
    SLOW_REQUEST_THRESHOLD,
)
from catalog.constants.uploads import (
    ALLOWED_IMAGE_TYPES,
    MAX_FILE_SIZE,
    MAX_FILES_PER_REQUEST,
)

__all__ = [
    "ALLOWED_IMAGE_TYPES",
    "CATEGORIES",
    "CATEGORIES_BY_ID",
    "DEFAULT_RATE_LIMIT_REQUESTS",
    "DEFAULT_RATE_LIMIT_WINDOW",
    "MAX_FILES_PER_REQUEST",
    "MAX_FILE_SIZE",
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "SECURITY_HEADERS",
    "SLOW_REQUEST_THRESHOLD",
]
