"""
Admin API views.

Requests reach these views only after AdminSecretMiddleware has checked
the X-Admin-Secret header.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activations.application.commands.reset_activation import ResetActivationCommand
from activations.application.handlers.reset_activation_handler import ResetActivationHandler
from api import dependencies
from api.admin_api.serializers import (
    ListOrdersQuerySerializer,
    OkResponseSerializer,
    ResetActivationRequestSerializer,
)
from api.serializers import OrderSerializer
from core.instrumentation import Status, StatusCode, get_tracer
from orders.application.handlers.order_handlers import ListOrdersHandler
from orders.application.queries.get_order import ListOrdersQuery

tracer = get_tracer(__name__)

ADMIN_SECRET_PARAMETER = OpenApiParameter(
    name="X-Admin-Secret",
    type=str,
    location=OpenApiParameter.HEADER,
    required=True,
    description="Shared admin secret",
)


class ResetActivationView(APIView):
    """View for clearing an order's activation."""

    @extend_schema(
        operation_id="reset_activation",
        summary="Reset Activation",
        description="Clear the device binding of an order so it can be activated again.",
        tags=["Admin API"],
        parameters=[ADMIN_SECRET_PARAMETER],
        request=ResetActivationRequestSerializer,
        responses={
            200: OkResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid admin secret"},
            404: {"description": "Order not found"},
        },
    )
    def post(self, request: Request) -> Response:
        """Reset an activation."""
        return async_to_sync(self._handle_reset)(request)

    async def _handle_reset(self, request: Request) -> Response:
        """Async handler for reset activation."""
        with tracer.start_as_current_span("reset_activation") as span:
            span.set_attribute("operation", "reset_activation")

            serializer = ResetActivationRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            command = ResetActivationCommand(
                order_id=serializer.validated_data.get("order_id"),
                order_code=serializer.validated_data.get("order_code"),
            )
            handler = ResetActivationHandler(order_repository=dependencies.order_repository())
            await handler.handle(command)

            span.set_status(Status(StatusCode.OK))
            return Response({"ok": True}, status=status.HTTP_200_OK)


class ListOrdersView(APIView):
    """View for the most recent orders."""

    @extend_schema(
        operation_id="list_orders",
        summary="List Orders",
        description="List the most recent orders, newest first.",
        tags=["Admin API"],
        parameters=[
            ADMIN_SECRET_PARAMETER,
            OpenApiParameter(name="limit", type=int, required=False),
        ],
        responses={
            200: OrderSerializer(many=True),
            401: {"description": "Invalid admin secret"},
        },
    )
    def get(self, request: Request) -> Response:
        """List recent orders."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        """Async handler for list orders."""
        with tracer.start_as_current_span("list_orders") as span:
            span.set_attribute("operation", "list_orders")

            serializer = ListOrdersQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            handler = ListOrdersHandler(
                order_repository=dependencies.order_repository(),
                catalog_repository=dependencies.catalog_repository(),
            )
            orders = await handler.handle(ListOrdersQuery(limit=serializer.validated_data["limit"]))
            span.set_attribute("order_count", len(orders))

            span.set_status(Status(StatusCode.OK))
            return Response(OrderSerializer(orders, many=True).data, status=status.HTTP_200_OK)
