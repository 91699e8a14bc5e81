"""Category, user profile, admin dashboard and liveness routes."""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.enums import AppStatus
from catalog.exceptions import InvalidArgumentError
from catalog.schemas.user import RoleUpdateRequest
from catalog.services import category_service
from catalog.services.admin_service import admin_service
from catalog.services.health_service import health_service
from catalog.services.user_service import user_service
from catalog.views.base import ADMIN, SIGNED_IN, CatalogAPIView


class CategoryListView(CatalogAPIView):
    def get(self, request):
        categories = category_service.list_categories()
        return self.success(categories, count=len(categories))


class CategoryDetailView(CatalogAPIView):
    def get(self, request, category_id):
        return self.success(category_service.get_category(category_id))


class MeView(CatalogAPIView):
    """The caller's profile, created from token claims on first access."""

    method_permissions = {"GET": SIGNED_IN}

    def get(self, request):
        return self.success(user_service.get_or_create_profile(request.user))


class AdminStatsView(CatalogAPIView):
    method_permissions = {"GET": ADMIN}

    def get(self, request):
        return self.success(admin_service.get_stats())


class AdminAppsView(CatalogAPIView):
    """Every app regardless of status."""

    method_permissions = {"GET": ADMIN}

    def get(self, request):
        """Optional ``status`` query parameter narrows the list."""
        status_filter = request.query_params.get("status") or None
        if status_filter is not None:
            try:
                status_filter = AppStatus(status_filter)
            except ValueError as e:
                raise InvalidArgumentError(
                    "Validation failed",
                    details=[{"field": "status", "message": "Unknown app status"}],
                ) from e
        apps = admin_service.list_apps(status_filter)
        return self.success(apps, count=len(apps))


class AdminUsersView(CatalogAPIView):
    method_permissions = {"GET": ADMIN}

    def get(self, request):
        users = user_service.list_users()
        return self.success(users, count=len(users))


class AdminUserRoleView(CatalogAPIView):
    """Grant or revoke the admin role."""

    method_permissions = {"PATCH": ADMIN}

    def patch(self, request, user_id):
        role_request = self.validate(RoleUpdateRequest, request.data)
        profile = user_service.set_role(user_id, role_request.role)
        return self.success(profile, message="User role updated successfully")


class ServiceInfoView(APIView):
    """Root ping. Exempt from authentication."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        info = health_service.get_service_info()
        return Response(info.to_response(), status=status.HTTP_200_OK)


class HealthCheckView(APIView):
    """Liveness probe endpoint.

    Returns 200 while the process is serving requests; no dependencies are
    checked. Exempt from authentication so probes need no token.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check.

        Args:
            _request: HTTP request object (unused).

        Returns:
            Response object with the liveness payload.
        """
        liveness = health_service.get_liveness_status()
        return Response(liveness.to_response(), status=status.HTTP_200_OK)
