"""
URL configuration for back-office order actions.

Mounted under /admin/ ahead of the Django admin site.
"""

from django.urls import path

from backoffice import views

urlpatterns = [
    path("orders/<uuid:order_id>/mark-paid", views.mark_order_paid, name="backoffice-mark-paid"),
    path(
        "activations/<uuid:order_id>/reset",
        views.reset_activation,
        name="backoffice-reset-activation",
    ),
]
