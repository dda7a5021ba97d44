"""
CreateCheckoutSessionCommand.

Command to open a provider checkout session for a persisted order.
"""
import uuid
from dataclasses import dataclass


@dataclass
class CreateCheckoutSessionCommand:
    """Command to create a checkout session."""

    order_id: uuid.UUID
    order_code: int
    amount: int
    item_title: str
    buyer_name: str = ""
    buyer_email: str = ""
