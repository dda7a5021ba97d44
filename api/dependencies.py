"""
Dependency wiring for the HTTP layer.

Repositories are stateless and shared. Anything that reads
configuration is built per request so settings overrides apply.
"""

from catalog.infrastructure.repositories.django_catalog_repository import (
    DjangoCatalogRepository,
)
from core.config import StoreSettings, get_store_settings
from orders.infrastructure.repositories.django_order_repository import DjangoOrderRepository
from payments.domain.signature import ReturnUrlSigner
from payments.infrastructure.payos_gateway import PayOSGateway
from payments.ports.payment_gateway import PaymentGateway

_order_repo = DjangoOrderRepository()
_catalog_repo = DjangoCatalogRepository()


def order_repository() -> DjangoOrderRepository:
    return _order_repo


def catalog_repository() -> DjangoCatalogRepository:
    return _catalog_repo


def store_settings() -> StoreSettings:
    return get_store_settings()


def return_url_signer() -> ReturnUrlSigner:
    return ReturnUrlSigner(store_settings().payos_checksum_key)


def payment_gateway() -> PaymentGateway:
    return PayOSGateway(store_settings())
