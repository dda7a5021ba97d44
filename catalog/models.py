"""
Model registry for the catalog app.

Django discovers models from ``<app>.models``; the ORM classes live in
the infrastructure layer.
"""
from catalog.infrastructure.models import CatalogItem  # noqa: F401
