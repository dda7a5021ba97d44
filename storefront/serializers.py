"""
Serializers for the storefront order flow.
"""

from rest_framework import serializers

from api.serializers import OrderSerializer


class PlaceOrderRequestSerializer(serializers.Serializer):
    """Serializer for the purchase form (form-encoded or JSON)."""

    name = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=254)
    codeId = serializers.UUIDField(source="catalog_item_id")


class ReturnQuerySerializer(serializers.Serializer):
    """Query string the provider appends to the success redirect."""

    orderCode = serializers.CharField(source="order_code", required=False, allow_blank=True)
    status = serializers.CharField(allow_blank=True, default="")
    sig = serializers.CharField(allow_blank=True, default="")


class OrderPageSerializer(serializers.Serializer):
    ok = serializers.BooleanField()
    order = OrderSerializer()
