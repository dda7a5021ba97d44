"""
Serializers shared by the public, storefront and admin endpoints.

Field names are camelCase on the wire; ``source`` maps them onto the
snake_case DTO attributes.
"""

from rest_framework import serializers


class CatalogItemSerializer(serializers.Serializer):
    """Serializer for CatalogItemDTO. Never exposes the drive link."""

    id = serializers.UUIDField()
    title = serializers.CharField()
    imageUrl = serializers.CharField(source="image_url")
    description = serializers.CharField()
    priceVND = serializers.IntegerField(source="price_vnd")
    priceDisplay = serializers.CharField(source="price_display")
    createdAt = serializers.DateTimeField(source="created_at")


class OrderSerializer(serializers.Serializer):
    """Serializer for OrderDTO."""

    id = serializers.UUIDField()
    orderCode = serializers.IntegerField(source="order_code")
    status = serializers.CharField()
    amount = serializers.IntegerField()
    amountDisplay = serializers.CharField(source="amount_display")
    buyerName = serializers.CharField(source="buyer_name")
    buyerEmail = serializers.CharField(source="buyer_email")
    catalogItemId = serializers.UUIDField(source="catalog_item_id", allow_null=True)
    catalogItemTitle = serializers.CharField(source="catalog_item_title", allow_null=True)
    checkoutUrl = serializers.CharField(source="checkout_url")
    paidAt = serializers.DateTimeField(source="paid_at", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    isActivated = serializers.BooleanField(source="is_activated")
    activatedAt = serializers.DateTimeField(source="activated_at", allow_null=True)
    deviceId = serializers.CharField(source="device_id", allow_null=True)


class OrderStatusSerializer(serializers.Serializer):
    """Serializer for OrderStatusDTO."""

    status = serializers.CharField()
