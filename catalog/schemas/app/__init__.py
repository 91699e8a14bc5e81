"""App listing schemas."""

from catalog.schemas.app.app_request import (
    SORTABLE_FIELDS,
    AdminAppUpdateRequest,
    AppCreateRequest,
    AppListQuery,
    AppStatusUpdateRequest,
    AppUpdateRequest,
    SearchQuery,
    SlugRequest,
)
from catalog.schemas.app.app_response import (
    AppResponse,
    AppSearchResult,
    AppStatusResponse,
    SlugResponse,
)

__all__ = [
    "SORTABLE_FIELDS",
    "AdminAppUpdateRequest",
    "AppCreateRequest",
    "AppListQuery",
    "AppResponse",
    "AppSearchResult",
    "AppStatusResponse",
    "AppStatusUpdateRequest",
    "AppUpdateRequest",
    "SearchQuery",
    "SlugRequest",
    "SlugResponse",
]
