"""
Storefront views.

The buyer-facing purchase flow: placing an order redirects to the
provider checkout page, and the provider redirects back to the success
or cancel endpoint. Pages are rendered as JSON.
"""

import logging
import uuid

from asgiref.sync import async_to_sync
from django.http import HttpResponseRedirect
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api import dependencies
from core.instrumentation import Status, StatusCode, get_tracer
from orders.application.commands.place_order import PlaceOrderCommand
from orders.application.handlers.order_handlers import GetOrderHandler
from orders.application.handlers.place_order_handler import PlaceOrderHandler
from orders.application.queries.get_order import GetOrderQuery
from payments.application.commands.confirm_return import ConfirmReturnCommand
from payments.application.handlers.confirm_return_handler import ConfirmReturnHandler
from payments.application.handlers.create_checkout_session_handler import (
    CreateCheckoutSessionHandler,
)
from storefront.serializers import (
    OrderPageSerializer,
    PlaceOrderRequestSerializer,
    ReturnQuerySerializer,
)

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class PlaceOrderView(APIView):
    """View for the purchase form."""

    parser_classes = [JSONParser, FormParser, MultiPartParser]

    @extend_schema(
        operation_id="place_order",
        summary="Place Order",
        description=(
            "Create a PENDING order for a catalog item and redirect the buyer "
            "to the payment provider's checkout page."
        ),
        tags=["Storefront"],
        request=PlaceOrderRequestSerializer,
        responses={
            302: {"description": "Redirect to the provider checkout URL"},
            400: {"description": "Bad Request"},
            404: {"description": "Catalog item not found"},
            502: {"description": "Could not create the order or payment link"},
        },
    )
    def post(self, request: Request):
        """Place an order and redirect to checkout."""
        return async_to_sync(self._handle_place_order)(request)

    async def _handle_place_order(self, request: Request):
        """Async handler for place order."""
        with tracer.start_as_current_span("place_order") as span:
            span.set_attribute("operation", "place_order")

            serializer = PlaceOrderRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            config = dependencies.store_settings()
            order_repository = dependencies.order_repository()
            checkout_handler = CreateCheckoutSessionHandler(
                order_repository=order_repository,
                payment_gateway=dependencies.payment_gateway(),
                signer=dependencies.return_url_signer(),
                config=config,
            )
            handler = PlaceOrderHandler(
                catalog_repository=dependencies.catalog_repository(),
                order_repository=order_repository,
                checkout_handler=checkout_handler,
            )
            command = PlaceOrderCommand(
                catalog_item_id=serializer.validated_data["catalog_item_id"],
                buyer_name=serializer.validated_data["name"],
                buyer_email=serializer.validated_data["email"],
            )
            span.set_attribute("catalog_item_id", str(command.catalog_item_id))

            result = await handler.handle(command)

            span.set_attribute("order_code", result.order_code)
            span.set_status(Status(StatusCode.OK))
            logger.info(
                "Redirecting order %s to checkout",
                result.order_code,
                extra={"order_id": str(result.order_id)},
            )
            return HttpResponseRedirect(result.checkout_url)


class OrderSuccessView(APIView):
    """View for the provider's success redirect."""

    @extend_schema(
        operation_id="order_success",
        summary="Order Success Return",
        description=(
            "Verify the signed return assertion and mark the order PAID when it "
            "holds. Always renders the order as persisted."
        ),
        tags=["Storefront"],
        parameters=[
            OpenApiParameter(name="orderCode", type=str, required=False),
            OpenApiParameter(name="status", type=str, required=False),
            OpenApiParameter(name="sig", type=str, required=False),
        ],
        responses={
            200: OrderPageSerializer,
            404: {"description": "Order not found"},
        },
    )
    def get(self, request: Request, order_id: uuid.UUID) -> Response:
        """Confirm the return trip and show the order."""
        return async_to_sync(self._handle_success)(request, order_id)

    async def _handle_success(self, request: Request, order_id: uuid.UUID) -> Response:
        """Async handler for the success redirect."""
        with tracer.start_as_current_span("confirm_return") as span:
            span.set_attribute("order_id", str(order_id))

            query = ReturnQuerySerializer(data=request.query_params)
            params = query.validated_data if query.is_valid() else {}

            handler = ConfirmReturnHandler(
                order_repository=dependencies.order_repository(),
                catalog_repository=dependencies.catalog_repository(),
                signer_factory=dependencies.return_url_signer,
            )
            order = await handler.handle(
                ConfirmReturnCommand(
                    order_id=order_id,
                    status=params.get("status", ""),
                    signature=params.get("sig", ""),
                )
            )

            span.set_attribute("order_status", order.status)
            span.set_status(Status(StatusCode.OK))
            return Response(OrderPageSerializer({"ok": True, "order": order}).data)


class OrderCancelView(APIView):
    """View for the provider's cancel redirect."""

    @extend_schema(
        operation_id="order_cancel",
        summary="Order Cancel Return",
        description="Show the order after the buyer abandoned checkout. Never mutates it.",
        tags=["Storefront"],
        responses={
            200: OrderPageSerializer,
            404: {"description": "Order not found"},
        },
    )
    def get(self, request: Request, order_id: uuid.UUID) -> Response:
        """Show the order after a cancelled checkout."""
        return async_to_sync(self._handle_cancel)(order_id)

    async def _handle_cancel(self, order_id: uuid.UUID) -> Response:
        with tracer.start_as_current_span("cancel_return") as span:
            span.set_attribute("order_id", str(order_id))
            handler = GetOrderHandler(
                order_repository=dependencies.order_repository(),
                catalog_repository=dependencies.catalog_repository(),
            )
            order = await handler.handle(GetOrderQuery(order_id=order_id))
            span.set_status(Status(StatusCode.OK))
            return Response(OrderPageSerializer({"ok": False, "order": order}).data)
