"""
Rate limiting middleware.

Limits the public license API per client address with a fixed window
counter kept in the Django cache.
"""

import hashlib
import time
from typing import Callable, Tuple

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse, JsonResponse

from core.http import get_client_ip
from core.metrics import errors_total

RATE_LIMITED_PATHS = ("/api/activate", "/api/validate")


class RateLimitMiddleware:
    """
    Rate limiting middleware per client address.

    Activation codes are short integers, so unauthenticated callers are
    throttled to slow down enumeration. Default: 60 requests per minute.
    """

    DEFAULT_RATE_LIMIT = 60
    RATE_LIMIT_WINDOW = 60  # seconds

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    @property
    def limit(self) -> int:
        return int(getattr(settings, "RATE_LIMIT_PER_MINUTE", self.DEFAULT_RATE_LIMIT))

    def _get_rate_limit_key(self, client_ip: str) -> str:
        """
        Generate cache key for rate limiting.

        Args:
            client_ip: Client address

        Returns:
            Cache key string
        """
        ip_hash = hashlib.sha256(client_ip.encode()).hexdigest()[:16]
        return f"rate_limit:{ip_hash}"

    def _check_rate_limit(self, client_ip: str, limit: int) -> Tuple[bool, int, int]:
        """
        Check if request is within rate limit.

        Args:
            client_ip: Client address
            limit: Requests allowed per window

        Returns:
            Tuple of (is_allowed, remaining, reset_time)
        """
        window_start = int(time.time() / self.RATE_LIMIT_WINDOW)
        full_key = f"{self._get_rate_limit_key(client_ip)}:{window_start}"
        reset_time = (window_start + 1) * self.RATE_LIMIT_WINDOW

        current_count = cache.get(full_key, 0)
        if current_count >= limit:
            return False, 0, reset_time

        if cache.add(full_key, 1, timeout=self.RATE_LIMIT_WINDOW):
            new_count = 1
        else:
            try:
                new_count = cache.incr(full_key, 1)
            except ValueError:
                cache.set(full_key, 1, timeout=self.RATE_LIMIT_WINDOW)
                new_count = 1

        return True, max(0, limit - new_count), reset_time

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request with rate limiting.

        Args:
            request: HTTP request

        Returns:
            HTTP response with rate limit headers
        """
        if not request.path.startswith(RATE_LIMITED_PATHS):
            return self.get_response(request)

        limit = self.limit
        if limit <= 0:
            return self.get_response(request)

        is_allowed, remaining, reset_time = self._check_rate_limit(get_client_ip(request), limit)

        if not is_allowed:
            errors_total.labels(error_type="rate_limit_exceeded", endpoint=request.path).inc()
            response = JsonResponse(
                {
                    "error": {
                        "code": "RATE_LIMIT_EXCEEDED",
                        "message": "Rate limit exceeded. Please try again later.",
                    }
                },
                status=429,
            )
            response["Retry-After"] = str(max(0, reset_time - int(time.time())))
        else:
            response = self.get_response(request)

        response["X-RateLimit-Limit"] = str(limit)
        response["X-RateLimit-Remaining"] = str(remaining)
        response["X-RateLimit-Reset"] = str(reset_time)
        return response
