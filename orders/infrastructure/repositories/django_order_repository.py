"""
Django implementation of OrderRepository port.

This adapter converts between domain entities and Django ORM models.
Every state transition is a single conditional UPDATE so concurrent
requests cannot both win.
"""

import logging
import uuid
from datetime import datetime
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction
from django.utils import timezone

from core.domain.exceptions import OrderCodeCollisionError
from core.domain.value_objects import MoneyVND, OrderStatus
from orders.domain.order import Activation, Order
from orders.infrastructure.models import Order as OrderModel
from orders.ports.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DjangoOrderRepository(OrderRepository):
    """
    Django ORM implementation of OrderRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Maps order transitions onto conditional updates
    3. Implements repository interface
    """

    def _to_domain(self, model: OrderModel) -> Order:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Order model

        Returns:
            Order domain entity
        """
        return Order(
            id=model.id,
            catalog_item_id=model.catalog_item_id,
            buyer_name=model.buyer_name,
            buyer_email=model.buyer_email,
            amount=MoneyVND(int(model.amount)),
            order_code=model.order_code,
            status=OrderStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
            payment_link_id=model.payment_link_id,
            checkout_url=model.checkout_url,
            paid_at=model.paid_at,
            activation=Activation(
                is_activated=model.activation_is_activated,
                activated_at=model.activation_activated_at,
                device_id=model.activation_device_id,
                ip=model.activation_ip,
            ),
        )

    def _insert(self, order: Order) -> OrderModel:
        try:
            with transaction.atomic():
                # pylint: disable=no-member
                return OrderModel.objects.create(
                    id=order.id,
                    catalog_item_id=order.catalog_item_id,
                    buyer_name=order.buyer_name,
                    buyer_email=order.buyer_email,
                    amount=order.amount.amount,
                    order_code=order.order_code,
                    status=order.status.value,
                    payment_link_id=order.payment_link_id,
                    checkout_url=order.checkout_url,
                    paid_at=order.paid_at,
                )
        except IntegrityError:
            if OrderModel.objects.filter(order_code=order.order_code).exists():  # pylint: disable=no-member
                logger.warning("Order code collision on %s", order.order_code)
                raise OrderCodeCollisionError()
            raise

    async def create(self, order: Order) -> Order:
        """
        Insert a new order.

        Args:
            order: Order entity to insert

        Returns:
            Persisted order

        Raises:
            OrderCodeCollisionError: If the order code is already taken
        """
        model = await sync_to_async(self._insert)(order)
        return self._to_domain(model)

    async def find_by_id(self, order_id: uuid.UUID) -> Optional[Order]:
        """
        Find an order by ID.

        Args:
            order_id: Order UUID

        Returns:
            Order entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(OrderModel.objects.get)(id=order_id)
            return self._to_domain(model)
        except OrderModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def find_by_order_code(self, order_code: int) -> Optional[Order]:
        """
        Find an order by its public numeric code.

        Args:
            order_code: Order code

        Returns:
            Order entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(OrderModel.objects.get)(order_code=order_code)
            return self._to_domain(model)
        except OrderModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def list_recent(self, limit: int = 100) -> List[Order]:
        models = await sync_to_async(
            lambda: list(OrderModel.objects.order_by("-created_at")[:limit])  # pylint: disable=no-member
        )()
        return [self._to_domain(model) for model in models]

    async def attach_checkout_session(
        self, order_id: uuid.UUID, payment_link_id: str, checkout_url: str
    ) -> None:
        await sync_to_async(
            lambda: OrderModel.objects.filter(id=order_id).update(  # pylint: disable=no-member
                payment_link_id=payment_link_id or "",
                checkout_url=checkout_url,
                updated_at=timezone.now(),
            )
        )()

    async def mark_paid(self, order_id: uuid.UUID, paid_at: datetime) -> bool:
        """
        Transition a PENDING order to PAID.

        Args:
            order_id: Order UUID
            paid_at: Payment confirmation time

        Returns:
            True if this call performed the transition
        """
        updated = await sync_to_async(
            lambda: OrderModel.objects.filter(  # pylint: disable=no-member
                id=order_id, status=OrderModel.Status.PENDING
            ).update(
                status=OrderModel.Status.PAID,
                paid_at=paid_at,
                updated_at=timezone.now(),
            )
        )()
        return updated == 1

    def _activate(self, order_code: int, activation: Activation) -> Optional[OrderModel]:
        # pylint: disable=no-member
        updated = OrderModel.objects.filter(
            order_code=order_code,
            status=OrderModel.Status.PAID,
            activation_is_activated=False,
        ).update(
            activation_is_activated=True,
            activation_activated_at=activation.activated_at,
            activation_device_id=activation.device_id,
            activation_ip=activation.ip,
            updated_at=timezone.now(),
        )
        if updated != 1:
            return None
        return OrderModel.objects.get(order_code=order_code)

    async def activate_if_unactivated(
        self, order_code: int, activation: Activation
    ) -> Optional[Order]:
        """
        Bind an activation to a PAID, unactivated order in one write.

        Args:
            order_code: Order code
            activation: Activated record to store

        Returns:
            The updated order, or None if another request got there first
        """
        model = await sync_to_async(self._activate)(order_code, activation)
        if model is None:
            return None
        return self._to_domain(model)

    async def reset_activation(self, order_id: uuid.UUID) -> bool:
        blank = Activation.blank()
        updated = await sync_to_async(
            lambda: OrderModel.objects.filter(id=order_id).update(  # pylint: disable=no-member
                activation_is_activated=blank.is_activated,
                activation_activated_at=blank.activated_at,
                activation_device_id=blank.device_id,
                activation_ip=blank.ip,
                updated_at=timezone.now(),
            )
        )()
        return updated == 1
