"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(
        self,
        message: str,
        code: str = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
            details: Extra fields rendered next to the error envelope
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class InvalidRequestError(DomainException):
    """Raised when a request is missing required input."""

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message, code="INVALID_REQUEST")


class CatalogException(DomainException):
    """Base exception for catalog-related errors."""

    pass


class CatalogItemNotFoundError(CatalogException):
    """Raised when a catalog item is not found."""

    def __init__(self, message: str = "Catalog item not found"):
        super().__init__(message, code="CATALOG_ITEM_NOT_FOUND")


class OrderException(DomainException):
    """Base exception for order-related errors."""

    pass


class OrderNotFoundError(OrderException):
    """Raised when an order is not found."""

    def __init__(self, message: str = "Order not found"):
        super().__init__(message, code="ORDER_NOT_FOUND")


class OrderNotPaidError(OrderException):
    """Raised when an operation requires a PAID order."""

    def __init__(self, message: str = "Order is not PAID"):
        super().__init__(message, code="ORDER_NOT_PAID")


class OrderCodeCollisionError(OrderException):
    """Raised when no unique order code could be allocated."""

    def __init__(self, message: str = "Could not allocate a unique order code"):
        super().__init__(message, code="ORDER_CODE_COLLISION")


class PaymentException(DomainException):
    """Base exception for payment-related errors."""

    pass


class PaymentProviderError(PaymentException):
    """Raised when the payment provider fails to issue a checkout session."""

    def __init__(self, message: str = "Payment provider request failed"):
        super().__init__(message, code="PAYMENT_PROVIDER_ERROR")


class SignatureInvalidError(PaymentException):
    """Raised when a return-trip signature does not verify."""

    def __init__(self, message: str = "Return signature is invalid"):
        super().__init__(message, code="SIGNATURE_INVALID")


class ActivationException(DomainException):
    """Base exception for activation-related errors."""

    pass


class AlreadyActivatedError(ActivationException):
    """Raised when an order has already been activated."""

    def __init__(
        self,
        message: str = "Order already activated",
        activated_at: Optional[str] = None,
        device_id: Optional[str] = None,
    ):
        super().__init__(
            message,
            code="ALREADY_ACTIVATED",
            details={"activatedAt": activated_at, "deviceId": device_id},
        )


class NotActivatedError(ActivationException):
    """Raised when validating an order that was never activated."""

    def __init__(self, message: str = "Order is not activated"):
        super().__init__(message, code="NOT_ACTIVATED")


class DeviceMismatchError(ActivationException):
    """Raised when the requesting device differs from the bound one."""

    def __init__(self, message: str = "Device does not match activation"):
        super().__init__(message, code="DEVICE_MISMATCH")


class InvalidAdminSecretError(DomainException):
    """Raised when the admin shared secret is missing or wrong."""

    def __init__(self, message: str = "Missing or invalid X-Admin-Secret header"):
        super().__init__(message, code="INVALID_ADMIN_SECRET")
