"""
ConfirmReturnCommand.

Command built from the provider's success redirect.
"""
import uuid
from dataclasses import dataclass


@dataclass
class ConfirmReturnCommand:
    """Command to confirm a return-trip callback."""

    order_id: uuid.UUID
    status: str = ""
    signature: str = ""
