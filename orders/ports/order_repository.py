"""
Order repository port (interface).

This defines the contract for order persistence operations.
State transitions are conditional writes so the database is the only
synchronisation point between concurrent requests.
"""
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from orders.domain.order import Activation, Order


class OrderRepository(ABC):
    """
    Abstract repository for Order entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
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
        pass

    @abstractmethod
    async def find_by_id(self, order_id: uuid.UUID) -> Optional[Order]:
        """
        Find an order by ID.

        Args:
            order_id: Order UUID

        Returns:
            Order entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_order_code(self, order_code: int) -> Optional[Order]:
        """
        Find an order by its public numeric code.

        Args:
            order_code: Order code

        Returns:
            Order entity or None if not found
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: int = 100) -> List[Order]:
        """
        List orders, most recent first.

        Args:
            limit: Maximum number of orders

        Returns:
            List of Order entities
        """
        pass

    @abstractmethod
    async def attach_checkout_session(
        self, order_id: uuid.UUID, payment_link_id: str, checkout_url: str
    ) -> None:
        """
        Store the provider checkout session on an order.

        Args:
            order_id: Order UUID
            payment_link_id: Provider session id
            checkout_url: Provider-hosted checkout page
        """
        pass

    @abstractmethod
    async def mark_paid(self, order_id: uuid.UUID, paid_at: datetime) -> bool:
        """
        Transition a PENDING order to PAID.

        Args:
            order_id: Order UUID
            paid_at: Payment confirmation time

        Returns:
            True if this call performed the transition, False if the order
            was already PAID or does not exist
        """
        pass

    @abstractmethod
    async def activate_if_unactivated(
        self, order_code: int, activation: Activation
    ) -> Optional[Order]:
        """
        Bind an activation to a PAID, unactivated order in one write.

        Args:
            order_code: Order code
            activation: Activated record to store

        Returns:
            The updated order, or None if the order was not eligible when
            the write happened
        """
        pass

    @abstractmethod
    async def reset_activation(self, order_id: uuid.UUID) -> bool:
        """
        Restore the blank activation on an order.

        Args:
            order_id: Order UUID

        Returns:
            True if the order exists
        """
        pass
