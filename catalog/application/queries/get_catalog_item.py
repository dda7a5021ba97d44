"""
GetCatalogItemQuery.

Query to fetch one public catalog listing.
"""
import uuid
from dataclasses import dataclass


@dataclass
class GetCatalogItemQuery:
    """Query to get a catalog item by id."""

    item_id: uuid.UUID
