"""
CatalogItem domain entity.

A purchasable source-code package. Orders copy its price at order
time, so editing an item never changes existing orders.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.events import utc_now
from core.domain.value_objects import MoneyVND


@dataclass(frozen=True)
class CatalogItem:
    """
    CatalogItem domain entity.

    ``drive_link`` is the fulfillment artifact; it is only handed out
    by a successful first activation.
    """

    id: uuid.UUID
    title: str
    image_url: str
    description: str
    drive_link: str
    price: MoneyVND
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate catalog item entity."""
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Catalog item title cannot be empty")
        if len(self.title) > 255:
            raise ValueError("Catalog item title too long")
        if not self.drive_link or len(self.drive_link.strip()) == 0:
            raise ValueError("Drive link is required")

    @classmethod
    def create(
        cls,
        title: str,
        drive_link: str,
        price_vnd=0,
        image_url: str = "",
        description: str = "",
        item_id: Optional[uuid.UUID] = None,
    ) -> "CatalogItem":
        """
        Create a new CatalogItem entity.

        Args:
            title: Display title
            drive_link: Download location handed out on activation
            price_vnd: Price in VND; coerced to a non-negative integer
            image_url: Optional cover image
            description: Optional long description
            item_id: Optional UUID (generated if not provided)

        Returns:
            CatalogItem entity instance
        """
        now = utc_now()
        return cls(
            id=item_id or uuid.uuid4(),
            title=title.strip(),
            image_url=image_url or "",
            description=description or "",
            drive_link=drive_link.strip(),
            price=MoneyVND.coerce(price_vnd),
            created_at=now,
            updated_at=now,
        )

    @property
    def price_vnd(self) -> int:
        return self.price.amount
