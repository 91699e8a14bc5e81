"""URL routing configuration for the catalog app."""

from django.urls import path

from catalog.views.apps import (
    AppBySlugView,
    AppCollectionView,
    AppDetailView,
    AppPublishView,
    AppSearchView,
    AppStatusView,
    AppUnpublishView,
    MyAppsView,
    SlugPreviewView,
)
from catalog.views.catalog_info import (
    AdminAppsView,
    AdminStatsView,
    AdminUserRoleView,
    AdminUsersView,
    CategoryDetailView,
    CategoryListView,
    HealthCheckView,
    MeView,
    ServiceInfoView,
)
from catalog.views.ratings import (
    AppRatingsView,
    HasRatedView,
    MyRatingView,
    RatingSummaryView,
)
from catalog.views.slider import (
    SlideDetailView,
    SlideMoveView,
    SliderAllView,
    SliderReorderView,
    SliderView,
    SlideToggleView,
)
from catalog.views.uploads import (
    LogoUploadView,
    MultipleUploadView,
    ScreenshotsUploadView,
    SingleUploadView,
    SlideImageUploadView,
    UploadDeleteView,
    UploadStatsView,
)

urlpatterns = [
    # Liveness
    path("", ServiceInfoView.as_view(), name="service-info"),
    path("health", HealthCheckView.as_view(), name="health"),
    # App endpoints (specific routes before api/apps/<app_id>)
    path("api/apps", AppCollectionView.as_view(), name="app-list"),
    path("api/apps/search", AppSearchView.as_view(), name="app-search"),
    path(
        "api/apps/generate-slug",
        SlugPreviewView.as_view(),
        name="app-generate-slug",
    ),
    path("api/apps/my/apps", MyAppsView.as_view(), name="my-apps"),
    path("api/apps/slug/<str:slug>", AppBySlugView.as_view(), name="app-by-slug"),
    path("api/apps/<str:app_id>", AppDetailView.as_view(), name="app-detail"),
    path(
        "api/apps/<str:app_id>/status",
        AppStatusView.as_view(),
        name="app-status",
    ),
    path(
        "api/apps/<str:app_id>/publish",
        AppPublishView.as_view(),
        name="app-publish",
    ),
    path(
        "api/apps/<str:app_id>/unpublish",
        AppUnpublishView.as_view(),
        name="app-unpublish",
    ),
    # Rating endpoints
    path("api/ratings/<str:app_id>", AppRatingsView.as_view(), name="app-ratings"),
    path(
        "api/ratings/<str:app_id>/summary",
        RatingSummaryView.as_view(),
        name="rating-summary",
    ),
    path(
        "api/ratings/<str:app_id>/my-rating",
        MyRatingView.as_view(),
        name="my-rating",
    ),
    path(
        "api/ratings/<str:app_id>/has-rated",
        HasRatedView.as_view(),
        name="has-rated",
    ),
    # Slider endpoints (specific routes before api/slider/<slide_id>)
    path("api/slider", SliderView.as_view(), name="slider"),
    path("api/slider/all", SliderAllView.as_view(), name="slider-all"),
    path("api/slider/reorder", SliderReorderView.as_view(), name="slider-reorder"),
    path("api/slider/<str:slide_id>", SlideDetailView.as_view(), name="slide-detail"),
    path(
        "api/slider/<str:slide_id>/toggle",
        SlideToggleView.as_view(),
        name="slide-toggle",
    ),
    path(
        "api/slider/<str:slide_id>/move",
        SlideMoveView.as_view(),
        name="slide-move",
    ),
    # Upload endpoints
    path("api/uploads", UploadDeleteView.as_view(), name="upload-delete"),
    path("api/uploads/single", SingleUploadView.as_view(), name="upload-single"),
    path(
        "api/uploads/multiple",
        MultipleUploadView.as_view(),
        name="upload-multiple",
    ),
    path("api/uploads/logo", LogoUploadView.as_view(), name="upload-logo"),
    path(
        "api/uploads/screenshots",
        ScreenshotsUploadView.as_view(),
        name="upload-screenshots",
    ),
    path("api/uploads/slide", SlideImageUploadView.as_view(), name="upload-slide"),
    path("api/uploads/stats", UploadStatsView.as_view(), name="upload-stats"),
    # Categories
    path("api/categories", CategoryListView.as_view(), name="category-list"),
    path(
        "api/categories/<str:category_id>",
        CategoryDetailView.as_view(),
        name="category-detail",
    ),
    # Users and admin dashboard
    path("api/users/me", MeView.as_view(), name="user-me"),
    path("api/admin/stats", AdminStatsView.as_view(), name="admin-stats"),
    path("api/admin/apps", AdminAppsView.as_view(), name="admin-apps"),
    path("api/admin/users", AdminUsersView.as_view(), name="admin-users"),
    path(
        "api/admin/users/<str:user_id>/role",
        AdminUserRoleView.as_view(),
        name="admin-user-role",
    ),
]
