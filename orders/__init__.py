"""
Orders module - the order ledger.

This module handles:
- Order entity with its embedded activation record
- Order code generation
- Order repository (port) and Django ORM adapter with atomic transitions
- Order placement, admin mark-paid and status queries
"""
