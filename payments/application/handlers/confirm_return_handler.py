"""
ConfirmReturnHandler.

Handler for the provider's success redirect. The signature is checked
against the order code stored on the order, never the one in the query
string. Verification problems never reach the buyer: the page always
shows whatever the ledger holds.
"""

import logging
from typing import Callable

from catalog.ports.catalog_repository import CatalogRepository
from core.domain.events import utc_now
from core.domain.exceptions import OrderNotFoundError, SignatureInvalidError
from core.domain.value_objects import OrderStatus
from core.infrastructure.events import event_bus
from core.metrics import return_signatures_rejected_total
from orders.application.dto.order_dto import OrderDTO
from orders.domain.events import OrderPaid
from orders.domain.order import Order
from orders.ports.order_repository import OrderRepository
from payments.application.commands.confirm_return import ConfirmReturnCommand
from payments.domain.signature import ReturnUrlSigner

logger = logging.getLogger(__name__)


class ConfirmReturnHandler:
    """Handler for ConfirmReturnCommand."""

    def __init__(
        self,
        order_repository: OrderRepository,
        catalog_repository: CatalogRepository,
        signer_factory: Callable[[], ReturnUrlSigner],
    ):
        """
        Initialize handler.

        The signer is built per confirmation so a missing checksum key
        degrades to an unconfirmed return.
        """
        self.order_repository = order_repository
        self.catalog_repository = catalog_repository
        self.signer_factory = signer_factory

    async def handle(self, command: ConfirmReturnCommand) -> OrderDTO:
        """
        Handle confirm return command.

        Args:
            command: ConfirmReturnCommand

        Returns:
            OrderDTO reflecting the persisted order

        Raises:
            OrderNotFoundError: If the order does not exist
        """
        order = await self.order_repository.find_by_id(command.order_id)
        if not order:
            raise OrderNotFoundError()

        try:
            await self._confirm(order, command)
        except SignatureInvalidError:
            return_signatures_rejected_total.inc()
            logger.warning("Return signature rejected for order %s", order.order_code)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error(
                "Return confirmation failed for order %s: %s",
                order.order_code,
                e,
                exc_info=True,
            )

        persisted = await self.order_repository.find_by_id(order.id) or order
        title = None
        if persisted.catalog_item_id:
            item = await self.catalog_repository.find_by_id(persisted.catalog_item_id)
            title = item.title if item else None
        return OrderDTO.from_entity(persisted, catalog_item_title=title)

    async def _confirm(self, order: Order, command: ConfirmReturnCommand) -> None:
        signer = self.signer_factory()
        if command.status != OrderStatus.PAID.value or not signer.verify(
            order.order_code, command.status, command.signature
        ):
            raise SignatureInvalidError()

        if order.is_paid:
            return

        transitioned = await self.order_repository.mark_paid(order.id, utc_now())
        if transitioned:
            await event_bus.publish(
                OrderPaid(order_id=order.id, order_code=order.order_code, source="return")
            )
            logger.info("Order %s marked PAID from return trip", order.order_code)
