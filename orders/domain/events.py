"""
Order domain events.

Domain events represent something that happened in the order ledger.
"""
import uuid
from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent, utc_now


class OrderPlaced(DomainEvent):
    """Event raised when a PENDING order is created."""

    def __init__(
        self,
        order_id: uuid.UUID,
        order_code: int,
        catalog_item_id: Optional[uuid.UUID],
        amount: int,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize OrderPlaced event.

        Args:
            order_id: Order UUID
            order_code: Public numeric order code
            catalog_item_id: Item being bought
            amount: Amount in VND
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or utc_now(),
            aggregate_id=str(order_id),
            event_type="OrderPlaced",
        )
        self.order_id = order_id
        self.order_code = order_code
        self.catalog_item_id = catalog_item_id
        self.amount = amount


class OrderPaid(DomainEvent):
    """Event raised when an order transitions PENDING -> PAID."""

    def __init__(
        self,
        order_id: uuid.UUID,
        order_code: int,
        source: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize OrderPaid event.

        Args:
            order_id: Order UUID
            order_code: Public numeric order code
            source: What confirmed the payment ("return" or "admin")
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or utc_now(),
            aggregate_id=str(order_id),
            event_type="OrderPaid",
        )
        self.order_id = order_id
        self.order_code = order_code
        self.source = source
