"""
ListCatalogItemsQuery.

Query to list the public catalog, newest first.
"""
from dataclasses import dataclass


@dataclass
class ListCatalogItemsQuery:
    """Query to list catalog items."""

    pass
