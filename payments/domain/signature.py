"""
Return-trip signatures.

The provider redirects the buyer back to the store with no server-side
callback. Before redirecting out, the store signs ``"{order_code}:PAID"``
with the provider checksum key and embeds the signature in the return
URL; on the way back it recomputes the signature from the stored order
code and the received status.
"""

import hashlib
import hmac
import uuid
from urllib.parse import urlencode

from core.domain.value_objects import OrderStatus


class ReturnUrlSigner:
    """HMAC-SHA256 signer for return URLs."""

    def __init__(self, checksum_key: str):
        if not checksum_key:
            raise ValueError("Checksum key is required to sign return URLs")
        self._key = checksum_key.encode("utf-8")

    def sign(self, order_code: int, status: str) -> str:
        """
        Sign an order code and status.

        Args:
            order_code: Order code
            status: Status text, e.g. ``PAID``

        Returns:
            Lowercase hex digest
        """
        message = f"{order_code}:{status}".encode("utf-8")
        return hmac.new(self._key, message, hashlib.sha256).hexdigest()

    def verify(self, order_code: int, status: str, signature: str) -> bool:
        """Constant-time check of a received signature."""
        if not signature:
            return False
        return hmac.compare_digest(self.sign(order_code, status), signature)

    def build_return_url(self, base_url: str, order_id: uuid.UUID, order_code: int) -> str:
        """
        Build the signed success URL handed to the provider.

        The status is always asserted as PAID; the provider only sends
        the buyer there after a successful payment.
        """
        status = OrderStatus.PAID.value
        query = urlencode(
            {
                "orderCode": order_code,
                "status": status,
                "sig": self.sign(order_code, status),
            }
        )
        return f"{base_url}/order/{order_id}/success?{query}"

    @staticmethod
    def build_cancel_url(base_url: str, order_id: uuid.UUID) -> str:
        return f"{base_url}/order/{order_id}/cancel"
