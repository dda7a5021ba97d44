"""
ValidateActivationHandler.

Handler for the repeatable license check. Strictly read-only.
"""

import logging

from activations.application.dto.activation_dto import ValidationResultDTO
from activations.application.queries.validate_activation import ValidateActivationQuery
from activations.domain.services import ActivationStateMachine
from core.domain.exceptions import DomainException, InvalidRequestError, OrderNotFoundError
from core.metrics import validations_total
from orders.ports.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ValidateActivationHandler:
    """Handler for ValidateActivationQuery."""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def handle(self, query: ValidateActivationQuery) -> ValidationResultDTO:
        """
        Handle validate activation query.

        Args:
            query: ValidateActivationQuery

        Returns:
            ValidationResultDTO

        Raises:
            InvalidRequestError: If order code or device id is missing
            OrderNotFoundError: If no order has this code
            OrderNotPaidError: If the order is not PAID
            NotActivatedError: If the order was never activated
            DeviceMismatchError: If a different device is bound
        """
        try:
            result = await self._validate(query)
        except DomainException as e:
            validations_total.labels(result=e.code.lower()).inc()
            raise
        validations_total.labels(result="ok").inc()
        return result

    async def _validate(self, query: ValidateActivationQuery) -> ValidationResultDTO:
        device_id = query.device_id.strip() if query.device_id else ""
        if not query.order_code or not device_id:
            raise InvalidRequestError("orderCode and deviceId are required")

        order = await self.order_repository.find_by_order_code(query.order_code)
        if not order:
            raise OrderNotFoundError()

        ActivationStateMachine.ensure_device_authorized(order, device_id)
        logger.debug("Order %s validated for device %s", order.order_code, device_id)
        return ValidationResultDTO(ok=True)
