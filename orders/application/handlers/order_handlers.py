"""
Order handlers for the admin override and read queries.
"""

import logging
from typing import List, Optional

from catalog.ports.catalog_repository import CatalogRepository
from core.domain.events import utc_now
from core.domain.exceptions import OrderNotFoundError
from core.infrastructure.events import event_bus
from orders.application.commands.mark_order_paid import MarkOrderPaidCommand
from orders.application.dto.order_dto import OrderDTO, OrderStatusDTO
from orders.application.queries.get_order import (
    GetOrderQuery,
    GetOrderStatusQuery,
    ListOrdersQuery,
)
from orders.domain.events import OrderPaid
from orders.domain.order import Order
from orders.ports.order_repository import OrderRepository

logger = logging.getLogger(__name__)


async def _item_title(catalog_repository: CatalogRepository, order: Order) -> Optional[str]:
    if not order.catalog_item_id:
        return None
    item = await catalog_repository.find_by_id(order.catalog_item_id)
    return item.title if item else None


class MarkOrderPaidHandler:
    """Handler for MarkOrderPaidCommand."""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def handle(self, command: MarkOrderPaidCommand) -> bool:
        """
        Handle mark order paid command.

        Already-PAID orders keep their original ``paid_at``.

        Args:
            command: MarkOrderPaidCommand

        Returns:
            True if the order transitioned, False if it was already PAID

        Raises:
            OrderNotFoundError: If the order does not exist
        """
        order = await self.order_repository.find_by_id(command.order_id)
        if not order:
            raise OrderNotFoundError()

        transitioned = await self.order_repository.mark_paid(order.id, utc_now())
        if transitioned:
            await event_bus.publish(
                OrderPaid(order_id=order.id, order_code=order.order_code, source="admin")
            )
            logger.info("Order %s marked PAID by admin", order.order_code)
        return transitioned


class GetOrderHandler:
    """Handler for GetOrderQuery."""

    def __init__(self, order_repository: OrderRepository, catalog_repository: CatalogRepository):
        self.order_repository = order_repository
        self.catalog_repository = catalog_repository

    async def handle(self, query: GetOrderQuery) -> OrderDTO:
        order = await self.order_repository.find_by_id(query.order_id)
        if not order:
            raise OrderNotFoundError()
        title = await _item_title(self.catalog_repository, order)
        return OrderDTO.from_entity(order, catalog_item_title=title)


class GetOrderStatusHandler:
    """Handler for GetOrderStatusQuery."""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def handle(self, query: GetOrderStatusQuery) -> OrderStatusDTO:
        order = await self.order_repository.find_by_id(query.order_id)
        if not order:
            raise OrderNotFoundError()
        return OrderStatusDTO(status=order.status.value)


class ListOrdersHandler:
    """Handler for ListOrdersQuery."""

    def __init__(self, order_repository: OrderRepository, catalog_repository: CatalogRepository):
        self.order_repository = order_repository
        self.catalog_repository = catalog_repository

    async def handle(self, query: ListOrdersQuery) -> List[OrderDTO]:
        """
        Handle list orders query.

        Args:
            query: ListOrdersQuery

        Returns:
            Most recent orders first
        """
        orders = await self.order_repository.list_recent(limit=query.limit)
        results = []
        for order in orders:
            title = await _item_title(self.catalog_repository, order)
            results.append(OrderDTO.from_entity(order, catalog_item_title=title))
        return results
