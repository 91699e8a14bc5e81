"""URL configuration for the UPlayG API."""

from django.urls import include, path

urlpatterns = [
    path("", include("catalog.urls")),
]

handler404 = "catalog.exceptions.handlers.json_not_found"
handler500 = "catalog.exceptions.handlers.json_server_error"
