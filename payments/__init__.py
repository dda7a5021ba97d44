"""
Payments module - the bridge to the payment provider.

This module handles:
- Forward-signed return URLs and their verification
- Payment gateway port and the payOS adapter
- Checkout session creation and return-trip confirmation
"""
