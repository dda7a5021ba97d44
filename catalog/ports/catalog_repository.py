"""
Catalog repository port (interface).

This defines the contract for catalog persistence operations.
Implementations are in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from catalog.domain.catalog_item import CatalogItem


class CatalogRepository(ABC):
    """
    Abstract repository for CatalogItem entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, item: CatalogItem) -> CatalogItem:
        """
        Save a catalog item.

        Args:
            item: CatalogItem entity to save

        Returns:
            Saved catalog item
        """
        pass

    @abstractmethod
    async def find_by_id(self, item_id: uuid.UUID) -> Optional[CatalogItem]:
        """
        Find a catalog item by ID.

        Args:
            item_id: CatalogItem UUID

        Returns:
            CatalogItem entity or None if not found
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[CatalogItem]:
        """
        List every catalog item, newest first.

        Returns:
            List of CatalogItem entities
        """
        pass
