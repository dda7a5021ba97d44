"""
Activation domain services.

The activation state machine over an order:

    NOT_ELIGIBLE          status != PAID
    ELIGIBLE_UNACTIVATED  PAID, not activated
    ACTIVATED             PAID, activated (device bound or null)

Activate moves ELIGIBLE_UNACTIVATED -> ACTIVATED, an admin reset moves
ACTIVATED -> ELIGIBLE_UNACTIVATED, nothing else changes state here.
"""

from enum import Enum
from typing import Optional

from core.domain.exceptions import (
    AlreadyActivatedError,
    DeviceMismatchError,
    NotActivatedError,
    OrderNotPaidError,
)
from orders.domain.order import Order


class ActivationState(Enum):
    """Activation state derived from an order."""

    NOT_ELIGIBLE = "not_eligible"
    ELIGIBLE_UNACTIVATED = "eligible_unactivated"
    ACTIVATED = "activated"

    def __str__(self) -> str:
        return self.value


def _isoformat(value) -> Optional[str]:
    return value.isoformat() if value else None


class ActivationStateMachine:
    """Domain service enforcing activation transitions."""

    @staticmethod
    def state_of(order: Order) -> ActivationState:
        """
        Derive the activation state of an order.

        Args:
            order: Order entity

        Returns:
            ActivationState
        """
        if not order.is_paid:
            return ActivationState.NOT_ELIGIBLE
        if order.activation.is_activated:
            return ActivationState.ACTIVATED
        return ActivationState.ELIGIBLE_UNACTIVATED

    @staticmethod
    def already_activated(order: Order) -> AlreadyActivatedError:
        """Build the conflict error carrying the existing binding."""
        return AlreadyActivatedError(
            activated_at=_isoformat(order.activation.activated_at),
            device_id=order.activation.device_id,
        )

    @staticmethod
    def ensure_can_activate(order: Order) -> None:
        """
        Check that an order may be activated now.

        Args:
            order: Order entity

        Raises:
            OrderNotPaidError: If the order is not PAID
            AlreadyActivatedError: If the order is already activated
        """
        state = ActivationStateMachine.state_of(order)
        if state == ActivationState.NOT_ELIGIBLE:
            raise OrderNotPaidError()
        if state == ActivationState.ACTIVATED:
            raise ActivationStateMachine.already_activated(order)

    @staticmethod
    def ensure_device_authorized(order: Order, device_id: str) -> None:
        """
        Check that a device may keep using an activated order.

        An activation bound without a device accepts any device.

        Args:
            order: Order entity
            device_id: Requesting device

        Raises:
            OrderNotPaidError: If the order is not PAID
            NotActivatedError: If the order was never activated
            DeviceMismatchError: If a different device is bound
        """
        state = ActivationStateMachine.state_of(order)
        if state == ActivationState.NOT_ELIGIBLE:
            raise OrderNotPaidError()
        if state == ActivationState.ELIGIBLE_UNACTIVATED:
            raise NotActivatedError()

        bound = order.activation.device_id
        if bound and bound != device_id:
            raise DeviceMismatchError()
