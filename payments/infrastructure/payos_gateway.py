"""
payOS implementation of the PaymentGateway port.

Talks to the payOS merchant API over HTTPS with ``requests``.
"""

import hashlib
import hmac
import logging
from typing import Any, Dict

import requests
from asgiref.sync import sync_to_async

from core.config import StoreSettings
from core.domain.exceptions import PaymentProviderError
from core.metrics import checkout_sessions_failed_total, payment_provider_duration_seconds
from payments.ports.payment_gateway import CheckoutRequest, CheckoutSession, PaymentGateway

logger = logging.getLogger(__name__)

PAYOS_SUCCESS_CODE = "00"


class PayOSGateway(PaymentGateway):
    """Client for the payOS payment-requests API."""

    def __init__(self, config: StoreSettings, session: requests.Session = None):
        self.base_url = config.payos_base_url
        self.client_id = config.payos_client_id
        self.api_key = config.payos_api_key
        self.checksum_key = config.payos_checksum_key
        self.timeout = config.payos_timeout_seconds
        self.session = session or requests.Session()

    def request_signature(self, request: CheckoutRequest) -> str:
        """
        Sign the fields payOS checks on a payment request.

        The message is the alphabetically ordered ``key=value`` pairs
        joined with ``&``.
        """
        message = (
            f"amount={request.amount}"
            f"&cancelUrl={request.cancel_url}"
            f"&description={request.description}"
            f"&orderCode={request.order_code}"
            f"&returnUrl={request.return_url}"
        )
        return hmac.new(
            self.checksum_key.encode("utf-8"), message.encode("utf-8"), hashlib.sha256
        ).hexdigest()

    def _payload(self, request: CheckoutRequest) -> Dict[str, Any]:
        payload = {
            "orderCode": request.order_code,
            "amount": request.amount,
            "description": request.description,
            "cancelUrl": request.cancel_url,
            "returnUrl": request.return_url,
            "items": [
                {"name": item.name, "quantity": item.quantity, "price": item.price}
                for item in request.items
            ],
            "signature": self.request_signature(request),
        }
        if request.buyer_name:
            payload["buyerName"] = request.buyer_name
        if request.buyer_email:
            payload["buyerEmail"] = request.buyer_email
        return payload

    def _post(self, request: CheckoutRequest) -> CheckoutSession:
        url = f"{self.base_url}/v2/payment-requests"
        headers = {
            "x-client-id": self.client_id,
            "x-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        try:
            with payment_provider_duration_seconds.time():
                response = self.session.post(
                    url, json=self._payload(request), headers=headers, timeout=self.timeout
                )
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            checkout_sessions_failed_total.inc()
            logger.error(
                "payOS request failed for order %s: %s",
                request.order_code,
                e,
                exc_info=True,
            )
            raise PaymentProviderError(f"Failed to create payment link: {e}") from e

        if body.get("code") != PAYOS_SUCCESS_CODE:
            checkout_sessions_failed_total.inc()
            logger.error(
                "payOS rejected order %s: %s %s",
                request.order_code,
                body.get("code"),
                body.get("desc"),
            )
            raise PaymentProviderError(f"payOS error: {body.get('desc', 'Unknown error')}")

        data = body.get("data") or {}
        checkout_url = data.get("checkoutUrl")
        if not checkout_url:
            checkout_sessions_failed_total.inc()
            logger.error("payOS returned no checkout URL for order %s", request.order_code)
            raise PaymentProviderError("payOS returned no checkout URL")

        return CheckoutSession(
            checkout_url=checkout_url,
            session_id=data.get("paymentLinkId") or "",
        )

    async def create_checkout_session(self, request: CheckoutRequest) -> CheckoutSession:
        """
        Create a payOS payment link.

        Args:
            request: CheckoutRequest

        Returns:
            CheckoutSession

        Raises:
            PaymentProviderError: On HTTP errors, timeouts, non-"00" codes or
                a missing checkout URL
        """
        return await sync_to_async(self._post, thread_sensitive=False)(request)
