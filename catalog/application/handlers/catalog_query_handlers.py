"""
Catalog query handlers.

Read-only handlers backing the public catalog pages.
"""

from typing import List

from catalog.application.dto.catalog_dto import CatalogItemDTO
from catalog.application.queries.get_catalog_item import GetCatalogItemQuery
from catalog.application.queries.list_catalog_items import ListCatalogItemsQuery
from catalog.ports.catalog_repository import CatalogRepository
from core.domain.exceptions import CatalogItemNotFoundError


class ListCatalogItemsHandler:
    """Handler for ListCatalogItemsQuery."""

    def __init__(self, catalog_repository: CatalogRepository):
        self.catalog_repository = catalog_repository

    async def handle(self, query: ListCatalogItemsQuery) -> List[CatalogItemDTO]:
        """
        Handle list catalog items query.

        Args:
            query: ListCatalogItemsQuery

        Returns:
            Catalog listings, newest first
        """
        items = await self.catalog_repository.list_all()
        return [CatalogItemDTO.from_entity(item) for item in items]


class GetCatalogItemHandler:
    """Handler for GetCatalogItemQuery."""

    def __init__(self, catalog_repository: CatalogRepository):
        self.catalog_repository = catalog_repository

    async def handle(self, query: GetCatalogItemQuery) -> CatalogItemDTO:
        """
        Handle get catalog item query.

        Args:
            query: GetCatalogItemQuery

        Returns:
            CatalogItemDTO

        Raises:
            CatalogItemNotFoundError: If the item does not exist
        """
        item = await self.catalog_repository.find_by_id(query.item_id)
        if not item:
            raise CatalogItemNotFoundError()
        return CatalogItemDTO.from_entity(item)
