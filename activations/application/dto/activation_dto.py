"""
Activation DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class ActivateOrderResponseDTO:
    """DTO for a successful first activation."""

    order_id: uuid.UUID
    order_code: int
    device_id: Optional[str]
    activated_at: datetime
    drive_link: Optional[str]
    message: str = "Activation successful"
    ok: bool = True


@dataclass
class ValidationResultDTO:
    """DTO for a successful validation."""

    ok: bool = True
