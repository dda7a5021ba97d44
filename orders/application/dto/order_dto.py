"""
Order DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from orders.domain.order import Order


@dataclass
class OrderDTO:
    """DTO for an order summary."""

    id: uuid.UUID
    order_code: int
    status: str
    amount: int
    amount_display: str
    buyer_name: str
    buyer_email: str
    catalog_item_id: Optional[uuid.UUID]
    catalog_item_title: Optional[str]
    checkout_url: str
    paid_at: Optional[datetime]
    created_at: datetime
    is_activated: bool
    activated_at: Optional[datetime]
    device_id: Optional[str]

    @classmethod
    def from_entity(cls, order: Order, catalog_item_title: Optional[str] = None) -> "OrderDTO":
        return cls(
            id=order.id,
            order_code=order.order_code,
            status=order.status.value,
            amount=order.amount.amount,
            amount_display=order.amount.format(),
            buyer_name=order.buyer_name,
            buyer_email=order.buyer_email,
            catalog_item_id=order.catalog_item_id,
            catalog_item_title=catalog_item_title,
            checkout_url=order.checkout_url,
            paid_at=order.paid_at,
            created_at=order.created_at,
            is_activated=order.activation.is_activated,
            activated_at=order.activation.activated_at,
            device_id=order.activation.device_id,
        )


@dataclass
class OrderStatusDTO:
    """DTO for the order status polling response."""

    status: str


@dataclass
class PlaceOrderResponseDTO:
    """DTO for a placed order."""

    order_id: uuid.UUID
    order_code: int
    checkout_url: str
