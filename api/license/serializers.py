"""
Serializers for the public license API.
"""

from rest_framework import serializers


class ActivateRequestSerializer(serializers.Serializer):
    """Serializer for activate request."""

    orderCode = serializers.IntegerField(source="order_code", min_value=1)
    deviceId = serializers.CharField(
        source="device_id",
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=255,
    )


class ActivateResponseSerializer(serializers.Serializer):
    """Serializer for ActivateOrderResponseDTO."""

    ok = serializers.BooleanField()
    message = serializers.CharField()
    orderId = serializers.UUIDField(source="order_id")
    orderCode = serializers.IntegerField(source="order_code")
    deviceId = serializers.CharField(source="device_id", allow_null=True)
    activatedAt = serializers.DateTimeField(source="activated_at")
    driveLink = serializers.CharField(source="drive_link", allow_null=True)


class ValidateRequestSerializer(serializers.Serializer):
    """Serializer for validate request. Both fields are required."""

    orderCode = serializers.IntegerField(source="order_code", min_value=1)
    deviceId = serializers.CharField(source="device_id", max_length=255)


class ValidateResponseSerializer(serializers.Serializer):
    """Serializer for ValidationResultDTO."""

    ok = serializers.BooleanField()
