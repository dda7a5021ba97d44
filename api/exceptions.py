"""
API exception handlers.

This module maps domain exceptions onto HTTP responses with a shared
error envelope: ``{"error": {"code", "message"}}`` plus any extra
details (e.g. the existing binding on an activation conflict).
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    AlreadyActivatedError,
    CatalogItemNotFoundError,
    DeviceMismatchError,
    DomainException,
    InvalidAdminSecretError,
    NotActivatedError,
    OrderCodeCollisionError,
    OrderNotFoundError,
    PaymentProviderError,
)
from core.metrics import errors_total

logger = logging.getLogger(__name__)

STATUS_BY_EXCEPTION = (
    ((OrderNotFoundError, CatalogItemNotFoundError), status.HTTP_404_NOT_FOUND),
    ((AlreadyActivatedError, DeviceMismatchError), status.HTTP_409_CONFLICT),
    ((NotActivatedError,), status.HTTP_403_FORBIDDEN),
    ((InvalidAdminSecretError,), status.HTTP_401_UNAUTHORIZED),
    ((PaymentProviderError,), status.HTTP_502_BAD_GATEWAY),
    ((OrderCodeCollisionError,), status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: DomainException) -> int:
    """Return the HTTP status for a domain exception (400 by default)."""
    for exception_types, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exception_types):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def error_body(exc: DomainException) -> Dict[str, Any]:
    """Render the error envelope for a domain exception."""
    message = exc.message
    if isinstance(exc, PaymentProviderError):
        message = "Could not create the order or payment link"
    elif isinstance(exc, OrderCodeCollisionError):
        message = "Could not create the order"
    body: Dict[str, Any] = {"error": {"code": exc.code, "message": message}}
    body.update(exc.details)
    return body


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, context, trace_id)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        code = exc.default_code.upper().replace("-", "_") if exc.default_code else "API_ERROR"
        detail = response.data
        if isinstance(detail, dict):
            detail = detail.get("detail", exc.default_detail)
        response.data = {"error": {"code": code, "message": detail}}
    elif isinstance(exc, Http404):
        response = Response(
            {"error": {"code": "NOT_FOUND", "message": "Resource not found"}},
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        response = _handle_unexpected_exception(exc, context, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _endpoint(context: Dict[str, Any]) -> str:
    request = context.get("request")
    return request.path if request else "unknown"


def _handle_domain_exception(
    exc: DomainException, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status_for(exc)
    errors_total.labels(error_type=exc.code, endpoint=_endpoint(context)).inc()

    if status_code >= 500:
        log = logger.error
    else:
        log = logger.warning
    log("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return Response(error_body(exc), status=status_code)


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    errors_total.labels(error_type="internal_error", endpoint=_endpoint(context)).inc()
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    return Response(
        {"error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
