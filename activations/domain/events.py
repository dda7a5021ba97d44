"""
Activation domain events.

Domain events represent something that happened in the activation domain.
"""
import uuid
from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent, utc_now


class OrderActivated(DomainEvent):
    """Event raised when a paid order is bound to a device."""

    def __init__(
        self,
        order_id: uuid.UUID,
        order_code: int,
        device_id: Optional[str],
        ip: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize OrderActivated event.

        Args:
            order_id: Order UUID
            order_code: Public numeric order code
            device_id: Bound device, or None
            ip: Requesting address
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or utc_now(),
            aggregate_id=str(order_id),
            event_type="OrderActivated",
        )
        self.order_id = order_id
        self.order_code = order_code
        self.device_id = device_id
        self.ip = ip


class ActivationReset(DomainEvent):
    """Event raised when an admin clears an order's activation."""

    def __init__(
        self,
        order_id: uuid.UUID,
        order_code: int,
        previous_device_id: Optional[str],
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or utc_now(),
            aggregate_id=str(order_id),
            event_type="ActivationReset",
        )
        self.order_id = order_id
        self.order_code = order_code
        self.previous_device_id = previous_device_id
