"""
CreateCheckoutSessionHandler.

Handler that signs the return URL, asks the provider for a checkout
session and stores it on the order.
"""

import logging

from core.config import StoreSettings
from orders.ports.order_repository import OrderRepository
from payments.application.commands.create_checkout_session import CreateCheckoutSessionCommand
from payments.domain.signature import ReturnUrlSigner
from payments.ports.payment_gateway import (
    CheckoutItem,
    CheckoutRequest,
    CheckoutSession,
    PaymentGateway,
)

logger = logging.getLogger(__name__)


class CreateCheckoutSessionHandler:
    """Handler for CreateCheckoutSessionCommand."""

    def __init__(
        self,
        order_repository: OrderRepository,
        payment_gateway: PaymentGateway,
        signer: ReturnUrlSigner,
        config: StoreSettings,
    ):
        """Initialize handler with its collaborators."""
        self.order_repository = order_repository
        self.payment_gateway = payment_gateway
        self.signer = signer
        self.config = config

    async def handle(self, command: CreateCheckoutSessionCommand) -> CheckoutSession:
        """
        Handle create checkout session command.

        Args:
            command: CreateCheckoutSessionCommand

        Returns:
            CheckoutSession issued by the provider

        Raises:
            PaymentProviderError: If the provider call fails; the order
                stays PENDING without a checkout URL
        """
        request = CheckoutRequest(
            order_code=command.order_code,
            amount=command.amount,
            description=self.config.payment_description,
            return_url=self.signer.build_return_url(
                self.config.base_url, command.order_id, command.order_code
            ),
            cancel_url=self.signer.build_cancel_url(self.config.base_url, command.order_id),
            buyer_name=command.buyer_name,
            buyer_email=command.buyer_email,
            items=[CheckoutItem(name=command.item_title, quantity=1, price=command.amount)],
        )

        session = await self.payment_gateway.create_checkout_session(request)

        await self.order_repository.attach_checkout_session(
            command.order_id, session.session_id, session.checkout_url
        )
        logger.info(
            "Checkout session created for order %s",
            command.order_code,
            extra={"order_id": str(command.order_id), "payment_link_id": session.session_id},
        )
        return session
