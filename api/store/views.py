"""
Store API views.

Public read endpoints: the catalog and the order status poll used by
the checkout return page.
"""

import uuid

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api import dependencies
from api.serializers import CatalogItemSerializer, OrderStatusSerializer
from catalog.application.handlers.catalog_query_handlers import (
    GetCatalogItemHandler,
    ListCatalogItemsHandler,
)
from catalog.application.queries.get_catalog_item import GetCatalogItemQuery
from catalog.application.queries.list_catalog_items import ListCatalogItemsQuery
from core.instrumentation import Status, StatusCode, get_tracer
from orders.application.handlers.order_handlers import GetOrderStatusHandler
from orders.application.queries.get_order import GetOrderStatusQuery

tracer = get_tracer(__name__)


class CatalogListView(APIView):
    """View for the public catalog."""

    @extend_schema(
        operation_id="list_catalog_items",
        summary="List Catalog",
        tags=["Store API"],
        responses={200: CatalogItemSerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """List catalog items, newest first."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        with tracer.start_as_current_span("list_catalog_items") as span:
            handler = ListCatalogItemsHandler(catalog_repository=dependencies.catalog_repository())
            items = await handler.handle(ListCatalogItemsQuery())
            span.set_attribute("item_count", len(items))
            span.set_status(Status(StatusCode.OK))
            return Response(CatalogItemSerializer(items, many=True).data)


class CatalogDetailView(APIView):
    """View for a single catalog listing."""

    @extend_schema(
        operation_id="get_catalog_item",
        summary="Get Catalog Item",
        tags=["Store API"],
        responses={
            200: CatalogItemSerializer,
            404: {"description": "Catalog item not found"},
        },
    )
    def get(self, request: Request, item_id: uuid.UUID) -> Response:
        """Get one catalog item."""
        return async_to_sync(self._handle_get)(item_id)

    async def _handle_get(self, item_id: uuid.UUID) -> Response:
        with tracer.start_as_current_span("get_catalog_item") as span:
            span.set_attribute("item_id", str(item_id))
            handler = GetCatalogItemHandler(catalog_repository=dependencies.catalog_repository())
            item = await handler.handle(GetCatalogItemQuery(item_id=item_id))
            span.set_status(Status(StatusCode.OK))
            return Response(CatalogItemSerializer(item).data)


class OrderStatusView(APIView):
    """View for polling the payment status of an order."""

    @extend_schema(
        operation_id="get_order_status",
        summary="Get Order Status",
        description="Return the payment status (PENDING or PAID) of an order.",
        tags=["Store API"],
        responses={
            200: OrderStatusSerializer,
            404: {"description": "Order not found"},
        },
    )
    def get(self, request: Request, order_id: uuid.UUID) -> Response:
        """Get the status of an order."""
        return async_to_sync(self._handle_status)(order_id)

    async def _handle_status(self, order_id: uuid.UUID) -> Response:
        with tracer.start_as_current_span("get_order_status") as span:
            span.set_attribute("order_id", str(order_id))
            handler = GetOrderStatusHandler(order_repository=dependencies.order_repository())
            result = await handler.handle(GetOrderStatusQuery(order_id=order_id))
            span.set_attribute("order_status", result.status)
            span.set_status(Status(StatusCode.OK))
            return Response(OrderStatusSerializer(result).data, status=status.HTTP_200_OK)
