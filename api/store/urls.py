"""
URL configuration for store API endpoints.
"""

from django.urls import path

from api.store import views

urlpatterns = [
    path("catalog/", views.CatalogListView.as_view(), name="catalog-list"),
    path("catalog/<uuid:item_id>/", views.CatalogDetailView.as_view(), name="catalog-detail"),
    path("order/<uuid:order_id>", views.OrderStatusView.as_view(), name="order-status"),
]
