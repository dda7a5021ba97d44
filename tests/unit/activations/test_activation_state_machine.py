"""
Unit tests for the activation state machine.
"""

import uuid
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from activations.domain.services import ActivationState, ActivationStateMachine
from core.domain.exceptions import (
    AlreadyActivatedError,
    DeviceMismatchError,
    NotActivatedError,
    OrderNotPaidError,
)
from core.domain.value_objects import MoneyVND
from orders.domain.order import Activation, Order
from tests.fakes import as_paid

ACTIVATED_AT = datetime(2026, 3, 1, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def pending():
    return Order.create(
        catalog_item_id=uuid.uuid4(),
        buyer_name="Buyer",
        buyer_email="buyer@example.com",
        amount=MoneyVND(100000),
        order_code=777,
    )


@pytest.fixture
def paid(pending):
    return as_paid(pending)


def bound_to(order, device_id):
    return replace(order, activation=Activation.bind(device_id, activated_at=ACTIVATED_AT))


class TestActivationStateMachine:
    """Tests for ActivationStateMachine."""

    def test_states(self, pending, paid):
        assert ActivationStateMachine.state_of(pending) == ActivationState.NOT_ELIGIBLE
        assert ActivationStateMachine.state_of(paid) == ActivationState.ELIGIBLE_UNACTIVATED
        assert ActivationStateMachine.state_of(bound_to(paid, "D1")) == ActivationState.ACTIVATED
        assert ActivationStateMachine.state_of(bound_to(paid, None)) == ActivationState.ACTIVATED

    def test_reset_returns_to_eligible(self, paid):
        reset = replace(bound_to(paid, "D1"), activation=Activation.blank())
        assert ActivationStateMachine.state_of(reset) == ActivationState.ELIGIBLE_UNACTIVATED

    def test_can_activate_paid_order(self, paid):
        ActivationStateMachine.ensure_can_activate(paid)

    def test_cannot_activate_pending_order(self, pending):
        with pytest.raises(OrderNotPaidError):
            ActivationStateMachine.ensure_can_activate(pending)

    def test_cannot_activate_twice(self, paid):
        with pytest.raises(AlreadyActivatedError) as exc_info:
            ActivationStateMachine.ensure_can_activate(bound_to(paid, "D1"))

        assert exc_info.value.details == {
            "activatedAt": ACTIVATED_AT.isoformat(),
            "deviceId": "D1",
        }

    def test_validate_bound_device(self, paid):
        ActivationStateMachine.ensure_device_authorized(bound_to(paid, "D1"), "D1")

    def test_validate_other_device(self, paid):
        with pytest.raises(DeviceMismatchError):
            ActivationStateMachine.ensure_device_authorized(bound_to(paid, "D1"), "D2")

    def test_validate_null_binding_accepts_any_device(self, paid):
        ActivationStateMachine.ensure_device_authorized(bound_to(paid, None), "D2")

    def test_validate_before_activation(self, paid):
        with pytest.raises(NotActivatedError):
            ActivationStateMachine.ensure_device_authorized(paid, "D1")

    def test_validate_unpaid(self, pending):
        with pytest.raises(OrderNotPaidError):
            ActivationStateMachine.ensure_device_authorized(pending, "D1")
