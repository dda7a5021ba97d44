"""
URL configuration for admin API endpoints.
"""

from django.urls import path

from api.admin_api import views

urlpatterns = [
    path("reset-activation", views.ResetActivationView.as_view(), name="reset-activation"),
    path("orders", views.ListOrdersView.as_view(), name="admin-list-orders"),
]
