"""
Unit tests for activation handlers.

Handlers run against in-memory repositories.
"""

import asyncio
from dataclasses import replace

import pytest

from activations.application.commands.activate_order import ActivateOrderCommand
from activations.application.commands.reset_activation import ResetActivationCommand
from activations.application.handlers.activate_order_handler import ActivateOrderHandler
from activations.application.handlers.reset_activation_handler import ResetActivationHandler
from activations.application.handlers.validate_activation_handler import (
    ValidateActivationHandler,
)
from activations.application.queries.validate_activation import ValidateActivationQuery
from core.domain.exceptions import (
    AlreadyActivatedError,
    DeviceMismatchError,
    InvalidRequestError,
    NotActivatedError,
    OrderNotFoundError,
    OrderNotPaidError,
)
from core.domain.value_objects import OrderStatus


def activate_handler(memory_orders, memory_catalog, config):
    return ActivateOrderHandler(
        order_repository=memory_orders,
        catalog_repository=memory_catalog,
        config=config,
    )


@pytest.mark.asyncio
class TestActivateOrderHandler:
    """Tests for ActivateOrderHandler."""

    async def test_first_activation(self, memory_orders, memory_catalog, paid_order, stored_item, config):
        handler = activate_handler(memory_orders, memory_catalog, config)

        result = await handler.handle(
            ActivateOrderCommand(order_code=paid_order.order_code, device_id="dev-123", ip="1.1.1.1")
        )

        assert result.ok is True
        assert result.drive_link == stored_item.drive_link
        assert result.device_id == "dev-123"
        stored = memory_orders.orders[paid_order.id]
        assert stored.activation.device_id == "dev-123"
        assert stored.activation.ip == "1.1.1.1"

    async def test_activation_without_device(self, memory_orders, memory_catalog, paid_order, config):
        handler = activate_handler(memory_orders, memory_catalog, config)

        result = await handler.handle(ActivateOrderCommand(order_code=paid_order.order_code))

        assert result.device_id is None
        assert memory_orders.orders[paid_order.id].is_activated

    async def test_device_required_when_configured(
        self, memory_orders, memory_catalog, paid_order, config
    ):
        strict = replace(config, activation_require_device_id=True)
        handler = activate_handler(memory_orders, memory_catalog, strict)

        with pytest.raises(InvalidRequestError):
            await handler.handle(ActivateOrderCommand(order_code=paid_order.order_code, device_id=" "))
        assert not memory_orders.orders[paid_order.id].is_activated

    async def test_second_activation_conflicts(
        self, memory_orders, memory_catalog, activated_order, config
    ):
        handler = activate_handler(memory_orders, memory_catalog, config)
        before = memory_orders.orders[activated_order.id]

        with pytest.raises(AlreadyActivatedError) as exc_info:
            await handler.handle(
                ActivateOrderCommand(order_code=activated_order.order_code, device_id="D2")
            )

        assert exc_info.value.details["deviceId"] == "D1"
        assert exc_info.value.details["activatedAt"] == before.activation.activated_at.isoformat()
        assert memory_orders.orders[activated_order.id] == before

    async def test_unpaid(self, memory_orders, memory_catalog, pending_order, config):
        handler = activate_handler(memory_orders, memory_catalog, config)

        with pytest.raises(OrderNotPaidError):
            await handler.handle(ActivateOrderCommand(order_code=pending_order.order_code))

    async def test_unknown_code(self, memory_orders, memory_catalog, config):
        handler = activate_handler(memory_orders, memory_catalog, config)

        with pytest.raises(OrderNotFoundError):
            await handler.handle(ActivateOrderCommand(order_code=1))

    async def test_concurrent_activations(self, memory_orders, memory_catalog, paid_order, config):
        handler = activate_handler(memory_orders, memory_catalog, config)

        results = await asyncio.gather(
            handler.handle(ActivateOrderCommand(order_code=paid_order.order_code, device_id="A")),
            handler.handle(ActivateOrderCommand(order_code=paid_order.order_code, device_id="B")),
            return_exceptions=True,
        )

        successes = [r for r in results if not isinstance(r, Exception)]
        conflicts = [r for r in results if isinstance(r, AlreadyActivatedError)]
        assert len(successes) == 1
        assert len(conflicts) == 1
        bound = memory_orders.orders[paid_order.id].activation.device_id
        assert bound == successes[0].device_id
        assert conflicts[0].details["deviceId"] == bound


@pytest.mark.asyncio
class TestValidateActivationHandler:
    """Tests for ValidateActivationHandler."""

    async def test_bound_device(self, memory_orders, activated_order):
        result = await ValidateActivationHandler(memory_orders).handle(
            ValidateActivationQuery(order_code=activated_order.order_code, device_id="D1")
        )
        assert result.ok is True

    async def test_other_device_does_not_mutate(self, memory_orders, activated_order):
        before = memory_orders.orders[activated_order.id]

        with pytest.raises(DeviceMismatchError):
            await ValidateActivationHandler(memory_orders).handle(
                ValidateActivationQuery(order_code=activated_order.order_code, device_id="D2")
            )

        assert memory_orders.orders[activated_order.id] == before

    async def test_not_activated(self, memory_orders, paid_order):
        with pytest.raises(NotActivatedError):
            await ValidateActivationHandler(memory_orders).handle(
                ValidateActivationQuery(order_code=paid_order.order_code, device_id="D1")
            )

    async def test_missing_device(self, memory_orders, activated_order):
        with pytest.raises(InvalidRequestError):
            await ValidateActivationHandler(memory_orders).handle(
                ValidateActivationQuery(order_code=activated_order.order_code, device_id="")
            )


@pytest.mark.asyncio
class TestResetActivationHandler:
    """Tests for ResetActivationHandler."""

    async def test_reset_then_activate_again(
        self, memory_orders, memory_catalog, activated_order, config
    ):
        await ResetActivationHandler(memory_orders).handle(
            ResetActivationCommand(order_code=activated_order.order_code)
        )

        stored = memory_orders.orders[activated_order.id]
        assert not stored.is_activated
        assert stored.activation.device_id is None
        assert stored.status == OrderStatus.PAID

        result = await activate_handler(memory_orders, memory_catalog, config).handle(
            ActivateOrderCommand(order_code=activated_order.order_code, device_id="D2")
        )
        assert result.device_id == "D2"

    async def test_reset_unactivated_order(self, memory_orders, paid_order):
        await ResetActivationHandler(memory_orders).handle(
            ResetActivationCommand(order_id=paid_order.id)
        )
        assert not memory_orders.orders[paid_order.id].is_activated

    async def test_unknown_order(self, memory_orders):
        with pytest.raises(OrderNotFoundError):
            await ResetActivationHandler(memory_orders).handle(
                ResetActivationCommand(order_code=123)
            )

    async def test_identifier_required(self, memory_orders):
        with pytest.raises(InvalidRequestError):
            await ResetActivationHandler(memory_orders).handle(ResetActivationCommand())
