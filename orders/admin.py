"""
Django admin configuration for orders app.

Orders are read-only here; the only mutations are the two actions,
which go through the same handlers as the API.
"""

from asgiref.sync import async_to_sync
from django.contrib import admin, messages
from django.utils.html import format_html

from activations.application.commands.reset_activation import ResetActivationCommand
from activations.application.handlers.reset_activation_handler import ResetActivationHandler
from orders.application.commands.mark_order_paid import MarkOrderPaidCommand
from orders.application.handlers.order_handlers import MarkOrderPaidHandler
from orders.infrastructure.models import Order
from orders.infrastructure.repositories.django_order_repository import DjangoOrderRepository

_order_repo = DjangoOrderRepository()


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin interface for Order model."""

    list_display = [
        "order_code",
        "catalog_item",
        "buyer_email",
        "amount_formatted",
        "status_display",
        "activation_display",
        "created_at",
    ]
    list_filter = ["status", "activation_is_activated", "created_at"]
    search_fields = ["order_code", "buyer_name", "buyer_email", "activation_device_id"]
    readonly_fields = [
        "id",
        "catalog_item",
        "buyer_name",
        "buyer_email",
        "amount",
        "order_code",
        "status",
        "payment_link_id",
        "checkout_url",
        "paid_at",
        "activation_is_activated",
        "activation_activated_at",
        "activation_device_id",
        "activation_ip",
        "created_at",
        "updated_at",
    ]
    fieldsets = (
        (
            "Order",
            {
                "fields": ("id", "order_code", "catalog_item", "amount", "status", "paid_at"),
            },
        ),
        (
            "Buyer",
            {
                "fields": ("buyer_name", "buyer_email"),
            },
        ),
        (
            "Payment",
            {
                "fields": ("payment_link_id", "checkout_url"),
                "classes": ("collapse",),
            },
        ),
        (
            "Activation",
            {
                "fields": (
                    "activation_is_activated",
                    "activation_activated_at",
                    "activation_device_id",
                    "activation_ip",
                ),
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
    actions = ["mark_paid", "reset_activation"]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def amount_formatted(self, obj):
        """Display amount with VND separators."""
        return obj.amount_display

    amount_formatted.short_description = "Amount"
    amount_formatted.admin_order_field = "amount"

    def status_display(self, obj):
        """Display payment status with color."""
        if obj.status == Order.Status.PAID:
            return format_html('<span style="color: green; font-weight: bold;">PAID</span>')
        return format_html('<span style="color: orange; font-weight: bold;">PENDING</span>')

    status_display.short_description = "Status"
    status_display.admin_order_field = "status"

    def activation_display(self, obj):
        """Display the bound device, if any."""
        if not obj.activation_is_activated:
            return "-"
        return obj.activation_device_id or "(any device)"

    activation_display.short_description = "Device"

    @admin.action(description="Mark selected orders as paid")
    def mark_paid(self, request, queryset):
        handler = MarkOrderPaidHandler(order_repository=_order_repo)
        updated = 0
        for order_id in queryset.values_list("id", flat=True):
            if async_to_sync(handler.handle)(MarkOrderPaidCommand(order_id=order_id)):
                updated += 1
        self.message_user(request, f"{updated} order(s) marked as paid.", messages.SUCCESS)

    @admin.action(description="Reset activation of selected orders")
    def reset_activation(self, request, queryset):
        handler = ResetActivationHandler(order_repository=_order_repo)
        count = 0
        for order_id in queryset.values_list("id", flat=True):
            async_to_sync(handler.handle)(ResetActivationCommand(order_id=order_id))
            count += 1
        self.message_user(request, f"Activation reset on {count} order(s).", messages.SUCCESS)

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("catalog_item")
