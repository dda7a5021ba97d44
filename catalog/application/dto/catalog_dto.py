"""
Catalog DTOs for API responses.

The public DTO deliberately has no drive link.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime

from catalog.domain.catalog_item import CatalogItem


@dataclass
class CatalogItemDTO:
    """DTO for a public catalog listing."""

    id: uuid.UUID
    title: str
    image_url: str
    description: str
    price_vnd: int
    price_display: str
    created_at: datetime

    @classmethod
    def from_entity(cls, item: CatalogItem) -> "CatalogItemDTO":
        return cls(
            id=item.id,
            title=item.title,
            image_url=item.image_url,
            description=item.description,
            price_vnd=item.price_vnd,
            price_display=item.price.format(),
            created_at=item.created_at,
        )
