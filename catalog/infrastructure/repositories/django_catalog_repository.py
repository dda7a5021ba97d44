"""
Django implementation of CatalogRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from catalog.domain.catalog_item import CatalogItem
from catalog.infrastructure.models import CatalogItem as CatalogItemModel
from catalog.ports.catalog_repository import CatalogRepository
from core.domain.value_objects import MoneyVND


class DjangoCatalogRepository(CatalogRepository):
    """Django ORM implementation of CatalogRepository."""

    def _to_domain(self, model: CatalogItemModel) -> CatalogItem:
        """
        Convert Django model to domain entity.

        Args:
            model: Django CatalogItem model

        Returns:
            CatalogItem domain entity
        """
        return CatalogItem(
            id=model.id,
            title=model.title,
            image_url=model.image_url,
            description=model.description,
            drive_link=model.drive_link,
            price=MoneyVND(int(model.price_vnd)),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _save_model(self, item: CatalogItem) -> CatalogItemModel:
        # pylint: disable=no-member
        model, _ = CatalogItemModel.objects.update_or_create(
            id=item.id,
            defaults={
                "title": item.title,
                "image_url": item.image_url,
                "description": item.description,
                "drive_link": item.drive_link,
                "price_vnd": item.price_vnd,
            },
        )
        return model

    async def save(self, item: CatalogItem) -> CatalogItem:
        """
        Save a catalog item.

        Args:
            item: CatalogItem entity to save

        Returns:
            Saved catalog item
        """
        model = await sync_to_async(self._save_model)(item)
        return self._to_domain(model)

    async def find_by_id(self, item_id: uuid.UUID) -> Optional[CatalogItem]:
        try:
            # pylint: disable=no-member
            model = await sync_to_async(CatalogItemModel.objects.get)(id=item_id)
            return self._to_domain(model)
        except CatalogItemModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def list_all(self) -> List[CatalogItem]:
        models = await sync_to_async(
            lambda: list(CatalogItemModel.objects.order_by("-created_at"))  # pylint: disable=no-member
        )()
        return [self._to_domain(model) for model in models]
