"""
Model registry for the orders app.

Django discovers models from ``<app>.models``; the ORM classes live in
the infrastructure layer.
"""
from orders.infrastructure.models import Order  # noqa: F401
