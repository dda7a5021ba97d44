"""
Catalog module - purchasable source-code packages.

This module handles:
- CatalogItem entity
- Catalog repository (port) and Django ORM adapter
- Public catalog queries and the admin CRUD surface
"""
