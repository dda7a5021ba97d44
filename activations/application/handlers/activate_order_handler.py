"""
ActivateOrderHandler.

Handler for the one-time activation of a paid order. The eligibility
check and the write are separate steps, but the write is conditional:
when two requests race, only one UPDATE matches and the loser is told
the order is already activated.
"""

import logging

from activations.application.commands.activate_order import ActivateOrderCommand
from activations.application.dto.activation_dto import ActivateOrderResponseDTO
from activations.domain.events import OrderActivated
from activations.domain.services import ActivationStateMachine
from catalog.ports.catalog_repository import CatalogRepository
from core.config import StoreSettings
from core.domain.exceptions import (
    AlreadyActivatedError,
    InvalidRequestError,
    OrderNotFoundError,
)
from core.infrastructure.events import event_bus
from core.metrics import activation_conflicts_total
from orders.domain.order import Activation
from orders.ports.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ActivateOrderHandler:
    """Handler for ActivateOrderCommand."""

    def __init__(
        self,
        order_repository: OrderRepository,
        catalog_repository: CatalogRepository,
        config: StoreSettings,
    ):
        """Initialize handler with repositories and store settings."""
        self.order_repository = order_repository
        self.catalog_repository = catalog_repository
        self.config = config

    async def handle(self, command: ActivateOrderCommand) -> ActivateOrderResponseDTO:
        """
        Handle activate order command.

        Args:
            command: ActivateOrderCommand

        Returns:
            ActivateOrderResponseDTO including the drive link

        Raises:
            InvalidRequestError: If a device id is required and missing
            OrderNotFoundError: If no order has this code
            OrderNotPaidError: If the order is not PAID
            AlreadyActivatedError: If the order is already activated
        """
        device_id = command.device_id.strip() if command.device_id else None
        if self.config.activation_require_device_id and not device_id:
            raise InvalidRequestError("deviceId is required")

        order = await self.order_repository.find_by_order_code(command.order_code)
        if not order:
            raise OrderNotFoundError()

        try:
            ActivationStateMachine.ensure_can_activate(order)
        except AlreadyActivatedError:
            activation_conflicts_total.inc()
            raise

        activation = Activation.bind(device_id=device_id, ip=command.ip)
        activated = await self.order_repository.activate_if_unactivated(
            command.order_code, activation
        )
        if activated is None:
            # Lost a race; report the winner's binding.
            activation_conflicts_total.inc()
            current = await self.order_repository.find_by_order_code(command.order_code)
            if current is None:
                raise OrderNotFoundError()
            raise ActivationStateMachine.already_activated(current)

        drive_link = None
        if activated.catalog_item_id:
            item = await self.catalog_repository.find_by_id(activated.catalog_item_id)
            drive_link = item.drive_link if item else None

        await event_bus.publish(
            OrderActivated(
                order_id=activated.id,
                order_code=activated.order_code,
                device_id=activated.activation.device_id,
                ip=activated.activation.ip,
            )
        )
        logger.info(
            "Order %s activated",
            activated.order_code,
            extra={"order_id": str(activated.id), "device_id": activated.activation.device_id},
        )

        return ActivateOrderResponseDTO(
            order_id=activated.id,
            order_code=activated.order_code,
            device_id=activated.activation.device_id,
            activated_at=activated.activation.activated_at,
            drive_link=drive_link,
        )
