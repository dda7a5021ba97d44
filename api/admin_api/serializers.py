"""
Serializers for the admin API.
"""

from rest_framework import serializers


class ResetActivationRequestSerializer(serializers.Serializer):
    """Serializer for reset activation request. One identifier is required."""

    orderCode = serializers.IntegerField(source="order_code", min_value=1, required=False)
    orderId = serializers.UUIDField(source="order_id", required=False)

    def validate(self, attrs):
        if not attrs.get("order_code") and not attrs.get("order_id"):
            raise serializers.ValidationError("orderCode or orderId is required")
        return attrs


class OkResponseSerializer(serializers.Serializer):
    ok = serializers.BooleanField()


class ListOrdersQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, max_value=500, default=100)
