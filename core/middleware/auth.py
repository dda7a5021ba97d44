"""
Admin shared-secret authentication middleware.

Guards the admin license API (``/api/admin/*``) with a single shared
secret sent in the ``X-Admin-Secret`` header.
"""

import hmac
import logging
from typing import Optional

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from api.exceptions import error_body, status_for
from core.config import get_store_settings
from core.domain.exceptions import InvalidAdminSecretError
from core.metrics import errors_total

logger = logging.getLogger(__name__)

ADMIN_API_PREFIX = "/api/admin/"
ADMIN_SECRET_HEADER = "X-Admin-Secret"


class AdminSecretMiddleware(MiddlewareMixin):
    """
    Middleware for admin API authentication.

    This middleware:
    1. Only inspects requests under /api/admin/
    2. Compares X-Admin-Secret with the configured admin secret in constant time
    3. Returns 401 Unauthorized if the secret is missing, wrong or unset
    """

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and validate the admin secret.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if authentication fails, None otherwise
        """
        if not request.path.startswith(ADMIN_API_PREFIX):
            return None

        try:
            self._authenticate(request)
        except InvalidAdminSecretError as e:
            errors_total.labels(error_type=e.code, endpoint=request.path).inc()
            return JsonResponse(error_body(e), status=status_for(e))

        request.is_admin = True  # type: ignore
        return None

    def _authenticate(self, request: HttpRequest) -> None:
        expected = get_store_settings().admin_api_secret
        provided = request.headers.get(ADMIN_SECRET_HEADER, "") or ""

        if not expected:
            logger.error("ADMIN_API_SECRET is not configured; rejecting admin API call")
            raise InvalidAdminSecretError()

        if not provided or not hmac.compare_digest(
            provided.encode("utf-8"), expected.encode("utf-8")
        ):
            logger.warning("Invalid admin secret for %s", request.path)
            raise InvalidAdminSecretError()
