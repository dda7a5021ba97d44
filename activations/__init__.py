"""
Activations module - the device activation state machine.

This module handles:
- Activation state derivation and transition rules
- One-time activation, repeatable validation and admin reset
"""
