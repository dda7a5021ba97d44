"""
Catalog Django ORM model.

This is the infrastructure layer model for catalog items.
Domain entities are in catalog.domain.catalog_item.
"""
import uuid

from django.core.validators import MinValueValidator
from django.db import models

from core.domain.value_objects import MoneyVND


class CatalogItem(models.Model):
    """
    A source-code package listed for sale.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    image_url = models.URLField(max_length=1000, blank=True, default="")
    description = models.TextField(blank=True, default="")
    drive_link = models.CharField(
        max_length=1000,
        help_text="Download location handed out on first activation",
    )
    price_vnd = models.PositiveBigIntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Price in VND",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "catalog_items"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="catalog_created_idx"),
        ]

    def __str__(self):
        return self.title

    @property
    def price_display(self) -> str:
        return str(MoneyVND.coerce(self.price_vnd))
