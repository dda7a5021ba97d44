"""
ResetActivationHandler.

Admin handler that clears an order's activation unconditionally.
"""

import logging

from activations.application.commands.reset_activation import ResetActivationCommand
from activations.domain.events import ActivationReset
from core.domain.exceptions import InvalidRequestError, OrderNotFoundError
from core.infrastructure.events import event_bus
from orders.ports.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ResetActivationHandler:
    """Handler for ResetActivationCommand."""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def handle(self, command: ResetActivationCommand) -> None:
        """
        Handle reset activation command.

        Args:
            command: ResetActivationCommand with an order id or order code

        Raises:
            InvalidRequestError: If neither identifier is given
            OrderNotFoundError: If the order does not exist
        """
        if command.order_id:
            order = await self.order_repository.find_by_id(command.order_id)
        elif command.order_code:
            order = await self.order_repository.find_by_order_code(command.order_code)
        else:
            raise InvalidRequestError("orderId or orderCode is required")

        if not order or not await self.order_repository.reset_activation(order.id):
            raise OrderNotFoundError()

        await event_bus.publish(
            ActivationReset(
                order_id=order.id,
                order_code=order.order_code,
                previous_device_id=order.activation.device_id,
            )
        )
        logger.info("Activation reset for order %s", order.order_code)
