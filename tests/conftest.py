"""
Pytest configuration and shared fixtures.
"""

import itertools
import uuid

import pytest
from django.core.cache import cache
from django.utils import timezone

from catalog.infrastructure.models import CatalogItem as CatalogItemModel
from catalog.infrastructure.repositories.django_catalog_repository import (
    DjangoCatalogRepository,
)
from core.config import StoreSettings, get_store_settings
from orders.infrastructure.models import Order as OrderModel
from orders.infrastructure.repositories.django_order_repository import DjangoOrderRepository
from payments.domain.signature import ReturnUrlSigner
from tests.fakes import FakePaymentGateway

ADMIN_SECRET = "test-admin-secret"

_order_codes = itertools.count(1_700_000_000_001)


@pytest.fixture(autouse=True)
def clear_cache():
    """Start every test with empty rate-limit counters."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def order_repository():
    """Fixture for OrderRepository."""
    return DjangoOrderRepository()


@pytest.fixture
def catalog_repository():
    """Fixture for CatalogRepository."""
    return DjangoCatalogRepository()


@pytest.fixture
def store_config() -> StoreSettings:
    """Fixture for the store settings built from test settings."""
    return get_store_settings()


@pytest.fixture
def signer(store_config):
    """Fixture for the return URL signer."""
    return ReturnUrlSigner(store_config.payos_checksum_key)


@pytest.fixture
def fake_gateway():
    """Fixture for a payment gateway that always succeeds."""
    return FakePaymentGateway()


@pytest.fixture
def db_catalog_item(db):
    """Fixture for a CatalogItem saved in database."""
    return CatalogItemModel.objects.create(
        title="Shop Management Source",
        image_url="https://img.example.com/shop.png",
        description="Django shop with admin panel",
        drive_link="https://drive.google.com/drive/folders/shop-source",
        price_vnd=100000,
    )


def make_order(catalog_item, status=OrderModel.Status.PENDING, **fields) -> OrderModel:
    """Create an order row for a catalog item."""
    values = {
        "catalog_item": catalog_item,
        "buyer_name": "Nguyen Van A",
        "buyer_email": "buyer@example.com",
        "amount": catalog_item.price_vnd,
        "order_code": next(_order_codes),
        "status": status,
    }
    if status == OrderModel.Status.PAID:
        values["paid_at"] = timezone.now()
    values.update(fields)
    return OrderModel.objects.create(**values)


@pytest.fixture
def db_pending_order(db, db_catalog_item):
    """Fixture for a PENDING order saved in database."""
    return make_order(db_catalog_item)


@pytest.fixture
def db_paid_order(db, db_catalog_item):
    """Fixture for a PAID, unactivated order saved in database."""
    return make_order(db_catalog_item, status=OrderModel.Status.PAID)


@pytest.fixture
def db_activated_order(db, db_catalog_item):
    """Fixture for a PAID order bound to device D1."""
    return make_order(
        db_catalog_item,
        status=OrderModel.Status.PAID,
        activation_is_activated=True,
        activation_activated_at=timezone.now(),
        activation_device_id="D1",
        activation_ip="10.0.0.1",
    )


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def admin_headers():
    """Headers carrying the admin API secret."""
    return {"HTTP_X_ADMIN_SECRET": ADMIN_SECRET}


@pytest.fixture
def missing_order_id():
    return uuid.uuid4()
