import uuid

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CatalogItem",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("image_url", models.URLField(blank=True, default="", max_length=1000)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "drive_link",
                    models.CharField(
                        help_text="Download location handed out on first activation",
                        max_length=1000,
                    ),
                ),
                (
                    "price_vnd",
                    models.PositiveBigIntegerField(
                        default=0,
                        help_text="Price in VND",
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "catalog_items",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="catalog_created_idx")
                ],
            },
        ),
    ]
