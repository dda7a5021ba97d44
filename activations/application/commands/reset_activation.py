"""
ResetActivationCommand.

Admin command clearing an order's activation so it can be re-activated.
"""
import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class ResetActivationCommand:
    """Command to reset an activation by order id or order code."""

    order_id: Optional[uuid.UUID] = None
    order_code: Optional[int] = None
