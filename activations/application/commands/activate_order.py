"""
ActivateOrderCommand.

Command sent by the purchased software on first launch.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ActivateOrderCommand:
    """Command to bind a paid order to a device."""

    order_code: int
    device_id: Optional[str] = None
    ip: str = ""
