"""
Order queries.

Queries used by the storefront pages, the polling API and the admin list.
"""
import uuid
from dataclasses import dataclass


@dataclass
class GetOrderQuery:
    """Query to get an order summary by id."""

    order_id: uuid.UUID


@dataclass
class GetOrderStatusQuery:
    """Query to get only the payment status of an order."""

    order_id: uuid.UUID


@dataclass
class ListOrdersQuery:
    """Query to list recent orders."""

    limit: int = 100
