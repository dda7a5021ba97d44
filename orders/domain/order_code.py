"""
Order code generation.

Order codes are the numeric payment reference sent to the provider and
the public key buyers use to activate. They must stay below 2**53 so
JavaScript clients can round-trip them.
"""
import secrets
import time

MAX_ORDER_CODE = 2**53 - 1


def generate_order_code() -> int:
    """
    Generate a new order code.

    Millisecond timestamp scaled by 1000 plus a random suffix, so two
    orders placed in the same millisecond rarely collide. Uniqueness is
    still enforced by the database.
    """
    code = int(time.time() * 1000) * 1000 + secrets.randbelow(1000)
    return code % MAX_ORDER_CODE or 1
