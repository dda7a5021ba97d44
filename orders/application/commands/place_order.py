"""
PlaceOrderCommand.

Command to create a PENDING order and open a checkout session for it.
"""
import uuid
from dataclasses import dataclass


@dataclass
class PlaceOrderCommand:
    """Command to place an order for a catalog item."""

    catalog_item_id: uuid.UUID
    buyer_name: str
    buyer_email: str
