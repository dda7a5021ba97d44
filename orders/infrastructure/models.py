"""
Order Django ORM model.

This is the infrastructure layer model for orders.
Domain entities are in orders.domain.order.
"""
import uuid

from django.db import models

from core.domain.value_objects import MoneyVND


class Order(models.Model):
    """
    A purchase attempt for one catalog item.

    The activation record is stored inline in ``activation_*`` columns.
    """

    class Status(models.TextChoices):
        PENDING = "PENDING", "Pending"
        PAID = "PAID", "Paid"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    catalog_item = models.ForeignKey(
        "catalog.CatalogItem",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )
    buyer_name = models.CharField(max_length=255, blank=True, default="")
    buyer_email = models.EmailField(max_length=254, blank=True, default="")
    amount = models.PositiveBigIntegerField(help_text="Price in VND at order time")
    order_code = models.BigIntegerField(
        unique=True, help_text="Payment reference and public activation key"
    )
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )
    payment_link_id = models.CharField(max_length=255, blank=True, default="")
    checkout_url = models.URLField(max_length=1000, blank=True, default="")
    paid_at = models.DateTimeField(null=True, blank=True)

    activation_is_activated = models.BooleanField(default=False)
    activation_activated_at = models.DateTimeField(null=True, blank=True)
    activation_device_id = models.CharField(max_length=255, null=True, blank=True)
    activation_ip = models.CharField(max_length=255, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="orders_created_idx"),
            models.Index(
                fields=["order_code", "status", "activation_is_activated"],
                name="orders_activation_idx",
            ),
        ]

    def __str__(self):
        return f"#{self.order_code} ({self.status})"

    @property
    def amount_display(self) -> str:
        return str(MoneyVND.coerce(self.amount))
