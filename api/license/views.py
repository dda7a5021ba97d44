"""
License API views.

These endpoints are called by the purchased software itself:
- Activate an order on first launch (one-time, returns the drive link)
- Validate an activated order on later launches
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activations.application.commands.activate_order import ActivateOrderCommand
from activations.application.handlers.activate_order_handler import ActivateOrderHandler
from activations.application.handlers.validate_activation_handler import (
    ValidateActivationHandler,
)
from activations.application.queries.validate_activation import ValidateActivationQuery
from api import dependencies
from api.license.serializers import (
    ActivateRequestSerializer,
    ActivateResponseSerializer,
    ValidateRequestSerializer,
    ValidateResponseSerializer,
)
from core.http import get_client_ip
from core.instrumentation import Status, StatusCode, get_tracer

tracer = get_tracer(__name__)


class ActivateView(APIView):
    """View for the one-time activation of a paid order."""

    @extend_schema(
        operation_id="activate_order",
        summary="Activate Order",
        description=(
            "Bind a PAID order to a device. Succeeds exactly once per order; "
            "the response carries the download link."
        ),
        tags=["License API"],
        request=ActivateRequestSerializer,
        responses={
            200: ActivateResponseSerializer,
            400: {"description": "Bad Request or order not PAID"},
            404: {"description": "Order not found"},
            409: {"description": "Order already activated"},
            429: {"description": "Rate limit exceeded"},
        },
    )
    def post(self, request: Request) -> Response:
        """Activate an order for a device."""
        return async_to_sync(self._handle_activate)(request)

    async def _handle_activate(self, request: Request) -> Response:
        """Async handler for activate."""
        with tracer.start_as_current_span("activate_order") as span:
            span.set_attribute("operation", "activate_order")

            serializer = ActivateRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            order_code = serializer.validated_data["order_code"]
            device_id = serializer.validated_data.get("device_id") or None
            span.set_attribute("order_code", order_code)
            if device_id:
                span.set_attribute("device_id", device_id)

            handler = ActivateOrderHandler(
                order_repository=dependencies.order_repository(),
                catalog_repository=dependencies.catalog_repository(),
                config=dependencies.store_settings(),
            )
            command = ActivateOrderCommand(
                order_code=order_code,
                device_id=device_id,
                ip=get_client_ip(request),
            )

            result = await handler.handle(command)

            span.set_status(Status(StatusCode.OK))
            return Response(ActivateResponseSerializer(result).data, status=status.HTTP_200_OK)


class ValidateView(APIView):
    """View for the repeatable license check."""

    @extend_schema(
        operation_id="validate_activation",
        summary="Validate Activation",
        description="Check that an activated order is bound to the calling device.",
        tags=["License API"],
        request=ValidateRequestSerializer,
        responses={
            200: ValidateResponseSerializer,
            400: {"description": "Bad Request or order not PAID"},
            403: {"description": "Order not activated"},
            404: {"description": "Order not found"},
            409: {"description": "Order bound to another device"},
            429: {"description": "Rate limit exceeded"},
        },
    )
    def post(self, request: Request) -> Response:
        """Validate an order for a device."""
        return async_to_sync(self._handle_validate)(request)

    async def _handle_validate(self, request: Request) -> Response:
        """Async handler for validate."""
        with tracer.start_as_current_span("validate_activation") as span:
            span.set_attribute("operation", "validate_activation")

            serializer = ValidateRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            query = ValidateActivationQuery(
                order_code=serializer.validated_data["order_code"],
                device_id=serializer.validated_data["device_id"],
            )
            span.set_attribute("order_code", query.order_code)

            handler = ValidateActivationHandler(order_repository=dependencies.order_repository())
            result = await handler.handle(query)

            span.set_status(Status(StatusCode.OK))
            return Response(ValidateResponseSerializer(result).data, status=status.HTTP_200_OK)
