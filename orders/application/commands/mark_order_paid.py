"""
MarkOrderPaidCommand.

Admin override confirming a payment by hand.
"""
import uuid
from dataclasses import dataclass


@dataclass
class MarkOrderPaidCommand:
    """Command to mark an order as PAID."""

    order_id: uuid.UUID
