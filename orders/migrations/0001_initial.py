import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("buyer_name", models.CharField(blank=True, default="", max_length=255)),
                ("buyer_email", models.EmailField(blank=True, default="", max_length=254)),
                (
                    "amount",
                    models.PositiveBigIntegerField(help_text="Price in VND at order time"),
                ),
                (
                    "order_code",
                    models.BigIntegerField(
                        help_text="Payment reference and public activation key", unique=True
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("PENDING", "Pending"), ("PAID", "Paid")],
                        db_index=True,
                        default="PENDING",
                        max_length=10,
                    ),
                ),
                ("payment_link_id", models.CharField(blank=True, default="", max_length=255)),
                ("checkout_url", models.URLField(blank=True, default="", max_length=1000)),
                ("paid_at", models.DateTimeField(blank=True, null=True)),
                ("activation_is_activated", models.BooleanField(default=False)),
                ("activation_activated_at", models.DateTimeField(blank=True, null=True)),
                (
                    "activation_device_id",
                    models.CharField(blank=True, max_length=255, null=True),
                ),
                ("activation_ip", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "catalog_item",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="orders",
                        to="catalog.catalogitem",
                    ),
                ),
            ],
            options={
                "db_table": "orders",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="orders_created_idx"),
                    models.Index(
                        fields=["order_code", "status", "activation_is_activated"],
                        name="orders_activation_idx",
                    ),
                ],
            },
        ),
    ]
