"""App listing routes under /api/apps."""

from rest_framework import status

from catalog.schemas.app import (
    AdminAppUpdateRequest,
    AppCreateRequest,
    AppListQuery,
    AppStatusUpdateRequest,
    AppUpdateRequest,
    SearchQuery,
    SlugRequest,
)
from catalog.services.app_service import app_service
from catalog.views.base import ADMIN, SIGNED_IN, CatalogAPIView


class AppCollectionView(CatalogAPIView):
    """Browse active apps and submit new ones."""

    method_permissions = {"POST": SIGNED_IN}

    def get(self, request):
        """List active apps.

        Query parameters: ``category``, ``limit`` (1-100, default 20),
        ``sortBy`` and ``order`` (asc/desc).
        """
        query = self.validate(AppListQuery, request.query_params)
        apps = app_service.list_active(query)
        return self.success(apps, count=len(apps))

    def post(self, request):
        """Submit an app; it starts as a draft owned by the caller.

        Returns:
            201 Created with the new app
            400 Bad Request if validation fails
            401 Unauthorized without a valid token
        """
        create_request = self.validate(AppCreateRequest, request.data)
        app = app_service.create_app(create_request, self.user_id())
        return self.success(
            app,
            status_code=status.HTTP_201_CREATED,
            message="App created successfully",
        )


class AppSearchView(CatalogAPIView):
    """Relevance-ranked search over active apps."""

    def get(self, request):
        """Search by ``q`` (at least 2 characters) with an optional ``limit``."""
        query = self.validate(SearchQuery, request.query_params)
        results = app_service.search(query.q, query.limit)
        return self.success(results, count=len(results), query=query.q)


class SlugPreviewView(CatalogAPIView):
    """Preview the slug generated for an app name."""

    def post(self, request):
        slug_request = self.validate(SlugRequest, request.data)
        return self.success(app_service.generate_slug(slug_request.app_name))


class MyAppsView(CatalogAPIView):
    """The caller's own apps in every status."""

    method_permissions = {"GET": SIGNED_IN}

    def get(self, request):
        apps = app_service.list_by_owner(self.user_id())
        return self.success(apps, count=len(apps))


class AppBySlugView(CatalogAPIView):
    """Look up an active app by slug."""

    def get(self, request, slug):
        return self.success(app_service.get_app_by_slug(slug))


class AppDetailView(CatalogAPIView):
    """Read, update and delete a single app.

    Reads are public for active apps; owners and admins can also read their
    drafts, so a token is honoured when valid and ignored otherwise.
    """

    method_permissions = {"PUT": SIGNED_IN, "DELETE": SIGNED_IN}

    def get(self, request, app_id):
        """Return an app and count the view."""
        return self.success(app_service.get_app(app_id, request.user))

    def put(self, request, app_id):
        """Update an app's listing.

        Admins may also change ``status``; for owners it is rejected along
        with owner and rating fields.

        Returns:
            200 OK with the updated app
            400 Bad Request if validation fails
            401 Unauthorized without a valid token
            403 Forbidden if the caller is neither owner nor admin
            404 Not Found if the app does not exist
        """
        schema = AdminAppUpdateRequest if request.user.is_admin else AppUpdateRequest
        update_request = self.validate(schema, request.data)
        app = app_service.update_app(app_id, update_request, request.user)
        return self.success(app, message="App updated successfully")

    def delete(self, request, app_id):
        """Delete an app. Existing ratings of it are kept."""
        app_service.delete_app(app_id, request.user)
        return self.success(message="App deleted successfully")


class AppStatusView(CatalogAPIView):
    """Set an app's status directly."""

    method_permissions = {"PATCH": ADMIN}

    def patch(self, request, app_id):
        status_request = self.validate(AppStatusUpdateRequest, request.data)
        result = app_service.update_status(
            app_id, status_request.status, self.user_id()
        )
        return self.success(result, message=f"App status updated to {result.status}")


class AppPublishView(CatalogAPIView):
    """Make an app public."""

    method_permissions = {"POST": ADMIN}

    def post(self, request, app_id):
        result = app_service.publish(app_id, self.user_id())
        return self.success(result, message="App published successfully")


class AppUnpublishView(CatalogAPIView):
    """Return an app to draft."""

    method_permissions = {"POST": ADMIN}

    def post(self, request, app_id):
        result = app_service.unpublish(app_id, self.user_id())
        return self.success(result, message="App unpublished successfully")
