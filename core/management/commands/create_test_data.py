"""
Django management command to create test data for development and testing.

Creates:
- A superuser (admin/admin)
- A sample catalog item
- Optionally, a PAID order for that item, ready to activate
"""

import logging

from asgiref.sync import async_to_sync
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from catalog.domain.catalog_item import CatalogItem
from catalog.infrastructure.models import CatalogItem as CatalogItemModel
from catalog.infrastructure.repositories.django_catalog_repository import (
    DjangoCatalogRepository,
)
from core.domain.events import utc_now
from orders.domain.order import Order
from orders.domain.order_code import generate_order_code
from orders.infrastructure.repositories.django_order_repository import DjangoOrderRepository

logger = logging.getLogger(__name__)
User = get_user_model()


class Command(BaseCommand):
    """Command to create test data."""

    help = "Create test data (superuser, catalog item, paid order)"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--skip-superuser",
            action="store_true",
            help="Skip creating superuser",
        )
        parser.add_argument(
            "--skip-order",
            action="store_true",
            help="Skip creating the paid test order",
        )
        parser.add_argument(
            "--title",
            type=str,
            default="Sample Source Code",
            help="Catalog item title (default: Sample Source Code)",
        )
        parser.add_argument(
            "--price",
            type=int,
            default=100000,
            help="Catalog item price in VND (default: 100000)",
        )
        parser.add_argument(
            "--drive-link",
            type=str,
            default="https://drive.google.com/drive/folders/sample",
            help="Download link handed out on activation",
        )
        parser.add_argument(
            "--buyer-email",
            type=str,
            default="buyer@example.com",
            help="Buyer email for the test order (default: buyer@example.com)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        if not options["skip_superuser"]:
            self.create_superuser()

        item = async_to_sync(self.create_catalog_item)(
            options["title"], options["price"], options["drive_link"]
        )

        order = None
        if not options["skip_order"]:
            order = async_to_sync(self.create_paid_order)(item, options["buyer_email"])

        self.print_summary(item, order)

    def create_superuser(self):
        """Create a superuser if it doesn't exist."""
        username = "admin"
        password = "admin"

        if User.objects.filter(username=username).exists():
            self.stdout.write(self.style.WARNING(f"Superuser '{username}' already exists"))
            return

        User.objects.create_superuser(
            username=username, email="admin@example.com", password=password
        )
        self.stdout.write(self.style.SUCCESS(f"Created superuser: {username} / {password}"))

    async def create_catalog_item(self, title: str, price: int, drive_link: str) -> CatalogItem:
        """Create the sample catalog item, or reuse one with the same title."""
        catalog_repo = DjangoCatalogRepository()

        existing = await CatalogItemModel.objects.filter(title=title).afirst()
        if existing:
            self.stdout.write(self.style.WARNING(f"Catalog item '{title}' already exists"))
            return await catalog_repo.find_by_id(existing.id)

        item = CatalogItem.create(
            title=title,
            drive_link=drive_link,
            price_vnd=price,
            description="Sample listing created by create_test_data",
        )
        item = await catalog_repo.save(item)
        self.stdout.write(self.style.SUCCESS(f"Created catalog item: {item.title} ({item.price})"))
        return item

    async def create_paid_order(self, item: CatalogItem, buyer_email: str) -> Order:
        """Create a PAID order for the item."""
        order_repo = DjangoOrderRepository()

        order = Order.create(
            catalog_item_id=item.id,
            buyer_name="Test Buyer",
            buyer_email=buyer_email,
            amount=item.price,
            order_code=generate_order_code(),
        )
        order = await order_repo.create(order)
        await order_repo.mark_paid(order.id, utc_now())
        logger.info("Created paid test order %s", order.order_code)
        return await order_repo.find_by_id(order.id)

    def print_summary(self, item: CatalogItem, order):
        """Print summary of created data."""
        self.stdout.write("\n" + "=" * 60)
        self.stdout.write(self.style.SUCCESS("Test Data Summary"))
        self.stdout.write("=" * 60)
        self.stdout.write(f"Catalog item: {item.title} (ID: {item.id})")
        self.stdout.write(f"Price: {item.price}")
        if order:
            self.stdout.write(f"Order code: {order.order_code} (status: {order.status.value})")
            self.stdout.write("\nActivate it with:")
            self.stdout.write(
                "  curl -X POST http://localhost:8000/api/activate "
                '-H "Content-Type: application/json" '
                f'-d \'{{"orderCode": {order.order_code}, "deviceId": "dev-123"}}\''
            )
        self.stdout.write("=" * 60 + "\n")
