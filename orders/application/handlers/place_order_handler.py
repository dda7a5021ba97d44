"""
PlaceOrderHandler.

Handler for placing an order: creates the PENDING order, then opens the
provider checkout session for it.
"""

import logging
from typing import Callable

from catalog.ports.catalog_repository import CatalogRepository
from core.domain.exceptions import (
    CatalogItemNotFoundError,
    OrderCodeCollisionError,
    PaymentProviderError,
)
from core.infrastructure.events import event_bus
from orders.application.commands.place_order import PlaceOrderCommand
from orders.application.dto.order_dto import PlaceOrderResponseDTO
from orders.domain.events import OrderPlaced
from orders.domain.order import Order
from orders.domain.order_code import generate_order_code
from orders.ports.order_repository import OrderRepository
from payments.application.commands.create_checkout_session import CreateCheckoutSessionCommand
from payments.application.handlers.create_checkout_session_handler import (
    CreateCheckoutSessionHandler,
)

logger = logging.getLogger(__name__)

MAX_ORDER_CODE_ATTEMPTS = 3


class PlaceOrderHandler:
    """Handler for PlaceOrderCommand."""

    def __init__(
        self,
        catalog_repository: CatalogRepository,
        order_repository: OrderRepository,
        checkout_handler: CreateCheckoutSessionHandler,
        order_code_factory: Callable[[], int] = generate_order_code,
    ):
        """Initialize handler with repositories and the checkout handler."""
        self.catalog_repository = catalog_repository
        self.order_repository = order_repository
        self.checkout_handler = checkout_handler
        self.order_code_factory = order_code_factory

    async def handle(self, command: PlaceOrderCommand) -> PlaceOrderResponseDTO:
        """
        Handle place order command.

        Args:
            command: PlaceOrderCommand

        Returns:
            PlaceOrderResponseDTO with the checkout URL to redirect to

        Raises:
            CatalogItemNotFoundError: If the catalog item does not exist
            OrderCodeCollisionError: If no unique order code could be allocated
            PaymentProviderError: If the checkout session could not be created
        """
        item = await self.catalog_repository.find_by_id(command.catalog_item_id)
        if not item:
            raise CatalogItemNotFoundError()

        order = await self._create_order(command, item.id, item.price)

        await event_bus.publish(
            OrderPlaced(
                order_id=order.id,
                order_code=order.order_code,
                catalog_item_id=item.id,
                amount=order.amount.amount,
            )
        )

        try:
            session = await self.checkout_handler.handle(
                CreateCheckoutSessionCommand(
                    order_id=order.id,
                    order_code=order.order_code,
                    amount=order.amount.amount,
                    item_title=item.title,
                    buyer_name=order.buyer_name,
                    buyer_email=order.buyer_email,
                )
            )
        except PaymentProviderError:
            logger.error("Order %s left PENDING without checkout URL", order.order_code)
            raise

        return PlaceOrderResponseDTO(
            order_id=order.id,
            order_code=order.order_code,
            checkout_url=session.checkout_url,
        )

    async def _create_order(self, command: PlaceOrderCommand, item_id, price) -> Order:
        for attempt in range(1, MAX_ORDER_CODE_ATTEMPTS + 1):
            order = Order.create(
                catalog_item_id=item_id,
                buyer_name=command.buyer_name,
                buyer_email=command.buyer_email,
                amount=price,
                order_code=self.order_code_factory(),
            )
            try:
                return await self.order_repository.create(order)
            except OrderCodeCollisionError:
                logger.warning(
                    "Order code collision (attempt %d/%d)", attempt, MAX_ORDER_CODE_ATTEMPTS
                )
        raise OrderCodeCollisionError()
