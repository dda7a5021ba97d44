"""
In-memory repository doubles for handler unit tests.
"""

import uuid
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional

import pytest

from catalog.domain.catalog_item import CatalogItem
from catalog.ports.catalog_repository import CatalogRepository
from core.config import StoreSettings
from core.domain.events import utc_now
from core.domain.exceptions import OrderCodeCollisionError
from core.domain.value_objects import OrderStatus
from orders.domain.order import Activation, Order
from orders.ports.order_repository import OrderRepository
from payments.domain.signature import ReturnUrlSigner
from tests.fakes import as_paid


class InMemoryCatalogRepository(CatalogRepository):
    def __init__(self):
        self.items: Dict[uuid.UUID, CatalogItem] = {}

    async def save(self, item: CatalogItem) -> CatalogItem:
        self.items[item.id] = item
        return item

    async def find_by_id(self, item_id: uuid.UUID) -> Optional[CatalogItem]:
        return self.items.get(item_id)

    async def list_all(self) -> List[CatalogItem]:
        return sorted(self.items.values(), key=lambda i: i.created_at, reverse=True)


class InMemoryOrderRepository(OrderRepository):
    """Order repository keeping the same conditional-update semantics."""

    def __init__(self):
        self.orders: Dict[uuid.UUID, Order] = {}

    def _by_code(self, order_code: int) -> Optional[Order]:
        for order in self.orders.values():
            if order.order_code == order_code:
                return order
        return None

    async def create(self, order: Order) -> Order:
        if self._by_code(order.order_code):
            raise OrderCodeCollisionError()
        self.orders[order.id] = order
        return order

    async def find_by_id(self, order_id: uuid.UUID) -> Optional[Order]:
        return self.orders.get(order_id)

    async def find_by_order_code(self, order_code: int) -> Optional[Order]:
        return self._by_code(order_code)

    async def list_recent(self, limit: int = 100) -> List[Order]:
        ordered = sorted(self.orders.values(), key=lambda o: o.created_at, reverse=True)
        return ordered[:limit]

    async def attach_checkout_session(
        self, order_id: uuid.UUID, payment_link_id: str, checkout_url: str
    ) -> None:
        order = self.orders[order_id]
        self.orders[order_id] = replace(
            order,
            payment_link_id=payment_link_id or "",
            checkout_url=checkout_url,
            updated_at=utc_now(),
        )

    async def mark_paid(self, order_id: uuid.UUID, paid_at: datetime) -> bool:
        order = self.orders.get(order_id)
        if not order or order.status != OrderStatus.PENDING:
            return False
        self.orders[order_id] = as_paid(order, paid_at)
        return True

    async def activate_if_unactivated(
        self, order_code: int, activation: Activation
    ) -> Optional[Order]:
        order = self._by_code(order_code)
        if not order or not order.is_paid or order.is_activated:
            return None
        activated = replace(order, activation=activation, updated_at=utc_now())
        self.orders[order.id] = activated
        return activated

    async def reset_activation(self, order_id: uuid.UUID) -> bool:
        order = self.orders.get(order_id)
        if not order:
            return False
        self.orders[order_id] = replace(
            order, activation=Activation.blank(), updated_at=utc_now()
        )
        return True


@pytest.fixture
def memory_catalog():
    return InMemoryCatalogRepository()


@pytest.fixture
def memory_orders():
    return InMemoryOrderRepository()


@pytest.fixture
def config():
    """Store settings independent of Django settings."""
    return StoreSettings(
        base_url="https://store.example.com",
        payos_client_id="client-id",
        payos_api_key="api-key",
        payos_checksum_key="checksum-key",
        payos_base_url="https://api-merchant.payos.vn",
        payos_timeout_seconds=5.0,
        admin_api_secret="admin-secret",
        activation_require_device_id=False,
        payment_description="Thanh toán đơn mua code",
    )


@pytest.fixture
def return_signer(config):
    return ReturnUrlSigner(config.payos_checksum_key)


@pytest.fixture
def sample_item():
    return CatalogItem.create(
        title="Inventory App Source",
        drive_link="https://drive.google.com/drive/folders/inventory",
        price_vnd=100000,
    )


@pytest.fixture
def stored_item(memory_catalog, sample_item):
    memory_catalog.items[sample_item.id] = sample_item
    return sample_item


def _order(item: CatalogItem, code: int) -> Order:
    return Order.create(
        catalog_item_id=item.id,
        buyer_name="Tran Thi B",
        buyer_email="b@example.com",
        amount=item.price,
        order_code=code,
    )


@pytest.fixture
def pending_order(memory_orders, stored_item):
    order = _order(stored_item, 4242)
    memory_orders.orders[order.id] = order
    return order


@pytest.fixture
def paid_order(memory_orders, stored_item):
    order = as_paid(_order(stored_item, 4343))
    memory_orders.orders[order.id] = order
    return order


@pytest.fixture
def activated_order(memory_orders, stored_item):
    order = as_paid(_order(stored_item, 4444))
    order = replace(order, activation=Activation.bind("D1", ip="10.0.0.1"))
    memory_orders.orders[order.id] = order
    return order
