"""
Test doubles shared by unit and integration tests.
"""

from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from core.domain.events import utc_now
from core.domain.exceptions import PaymentProviderError
from core.domain.value_objects import OrderStatus
from orders.domain.order import Order
from payments.ports.payment_gateway import CheckoutRequest, CheckoutSession, PaymentGateway


def as_paid(order: Order, paid_at: Optional[datetime] = None) -> Order:
    """Return a PAID copy of an order entity."""
    now = paid_at or utc_now()
    return replace(order, status=OrderStatus.PAID, paid_at=now, updated_at=now)


class FakePaymentGateway(PaymentGateway):
    """Payment gateway double recording every checkout request."""

    def __init__(self, fail: bool = False, checkout_url: Optional[str] = None):
        self.fail = fail
        self.checkout_url = checkout_url
        self.requests: List[CheckoutRequest] = []

    async def create_checkout_session(self, request: CheckoutRequest) -> CheckoutSession:
        self.requests.append(request)
        if self.fail:
            raise PaymentProviderError("payOS unavailable")
        return CheckoutSession(
            checkout_url=self.checkout_url or f"https://pay.payos.vn/web/{request.order_code}",
            session_id=f"plink-{request.order_code}",
        )
