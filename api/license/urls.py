"""
URL configuration for license API endpoints.
"""

from django.urls import path

from api.license import views

urlpatterns = [
    path("activate", views.ActivateView.as_view(), name="activate"),
    path("validate", views.ValidateView.as_view(), name="validate"),
]
