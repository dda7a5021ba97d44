"""
ValidateActivationQuery.

Repeatable, read-only license check from an activated device.
"""
from dataclasses import dataclass


@dataclass
class ValidateActivationQuery:
    """Query to validate that a device may use an order."""

    order_code: int
    device_id: str
