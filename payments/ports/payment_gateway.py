"""
Payment gateway port (interface).

The provider is a black box: give it an order, get back a hosted
checkout URL.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class CheckoutItem:
    """Line item shown on the provider checkout page."""

    name: str
    quantity: int
    price: int


@dataclass(frozen=True)
class CheckoutRequest:
    """Everything the provider needs to open a checkout session."""

    order_code: int
    amount: int
    description: str
    return_url: str
    cancel_url: str
    buyer_name: str = ""
    buyer_email: str = ""
    items: List[CheckoutItem] = field(default_factory=list)


@dataclass(frozen=True)
class CheckoutSession:
    """Provider response for a created checkout session."""

    checkout_url: str
    session_id: str = ""


class PaymentGateway(ABC):
    """Abstract payment provider."""

    @abstractmethod
    async def create_checkout_session(self, request: CheckoutRequest) -> CheckoutSession:
        """
        Create a hosted checkout session.

        Args:
            request: CheckoutRequest

        Returns:
            CheckoutSession with a non-empty checkout URL

        Raises:
            PaymentProviderError: If the provider rejects or cannot be reached
        """
        pass
