"""
Order domain entity.

This is the core domain entity of the store: a purchase attempt for one
catalog item, its payment status and its embedded device activation.
It contains business logic and is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from core.domain.events import utc_now
from core.domain.value_objects import MoneyVND, OrderStatus


@dataclass(frozen=True)
class Activation:
    """
    Activation record owned by an order.

    Never addressed on its own; it only changes through the order
    repository's atomic activation operations.
    """

    is_activated: bool = False
    activated_at: Optional[datetime] = None
    device_id: Optional[str] = None
    ip: str = ""

    @classmethod
    def blank(cls) -> "Activation":
        """Return the unactivated record."""
        return cls()

    @classmethod
    def bind(
        cls,
        device_id: Optional[str],
        ip: str = "",
        activated_at: Optional[datetime] = None,
    ) -> "Activation":
        """
        Create an activated record.

        Args:
            device_id: Device to bind; blank values bind no device
            ip: Requesting address, observational only
            activated_at: Activation time (defaults to now)

        Returns:
            Activated record
        """
        device_id = device_id.strip() if device_id else None
        return cls(
            is_activated=True,
            activated_at=activated_at or utc_now(),
            device_id=device_id or None,
            ip=ip or "",
        )


@dataclass(frozen=True)
class Order:
    """
    Order domain entity.

    ``amount`` is copied from the catalog item at creation and never
    re-derived. ``status`` only moves forward.
    """

    id: uuid.UUID
    catalog_item_id: Optional[uuid.UUID]
    buyer_name: str
    buyer_email: str
    amount: MoneyVND
    order_code: int
    status: OrderStatus
    created_at: datetime
    updated_at: datetime
    payment_link_id: str = ""
    checkout_url: str = ""
    paid_at: Optional[datetime] = None
    activation: Activation = field(default_factory=Activation.blank)

    def __post_init__(self):
        """Validate order entity."""
        if self.order_code is None or self.order_code <= 0:
            raise ValueError("Order code must be a positive integer")
        if self.activation.is_activated and self.status != OrderStatus.PAID:
            raise ValueError("Only PAID orders can carry an activation")

    @classmethod
    def create(
        cls,
        catalog_item_id: uuid.UUID,
        buyer_name: str,
        buyer_email: str,
        amount: MoneyVND,
        order_code: int,
        order_id: Optional[uuid.UUID] = None,
    ) -> "Order":
        """
        Create a new PENDING order.

        Args:
            catalog_item_id: Item being bought
            buyer_name: Buyer display name
            buyer_email: Buyer email
            amount: Price copied from the catalog item
            order_code: Unique positive integer shared with the payment provider
            order_id: Optional UUID (generated if not provided)

        Returns:
            Order entity instance
        """
        now = utc_now()
        return cls(
            id=order_id or uuid.uuid4(),
            catalog_item_id=catalog_item_id,
            buyer_name=(buyer_name or "").strip(),
            buyer_email=(buyer_email or "").strip(),
            amount=amount,
            order_code=order_code,
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    @property
    def is_activated(self) -> bool:
        return self.activation.is_activated

