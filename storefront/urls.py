"""
URL configuration for the storefront order flow.
"""

from django.urls import path

from storefront import views

urlpatterns = [
    path("order", views.PlaceOrderView.as_view(), name="place-order"),
    path("order/<uuid:order_id>/success", views.OrderSuccessView.as_view(), name="order-success"),
    path("order/<uuid:order_id>/cancel", views.OrderCancelView.as_view(), name="order-cancel"),
]
