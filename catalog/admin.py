"""
Django admin configuration for catalog app.
"""
from django.contrib import admin
from django.utils.html import format_html

from catalog.infrastructure.models import CatalogItem


@admin.register(CatalogItem)
class CatalogItemAdmin(admin.ModelAdmin):
    """Admin interface for CatalogItem model."""

    list_display = [
        "title",
        "price_formatted",
        "cover",
        "order_count",
        "created_at",
    ]
    list_filter = ["created_at", "updated_at"]
    search_fields = ["title", "description"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Listing",
            {
                "fields": ("id", "title", "image_url", "description", "price_vnd"),
            },
        ),
        (
            "Fulfillment",
            {
                "fields": ("drive_link",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def price_formatted(self, obj):
        """Display price with VND separators."""
        return obj.price_display

    price_formatted.short_description = "Price"
    price_formatted.admin_order_field = "price_vnd"

    def cover(self, obj):
        """Display a small thumbnail of the cover image."""
        if not obj.image_url:
            return "-"
        return format_html('<img src="{}" style="height: 32px;" />', obj.image_url)

    cover.short_description = "Image"

    def order_count(self, obj):
        """Display number of orders placed for this item."""
        return obj.orders.count()

    order_count.short_description = "Orders"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).prefetch_related("orders")
