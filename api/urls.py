"""
URL configuration for the JSON API.
"""

from django.urls import include, path

urlpatterns = [
    path("", include("api.license.urls")),
    path("", include("api.store.urls")),
    path("admin/", include("api.admin_api.urls")),
]
