"""
HTTP helpers shared by views and middleware.
"""
from django.http import HttpRequest


def get_client_ip(request: HttpRequest) -> str:
    """
    Return the requesting address.

    Prefers the first entry of ``X-Forwarded-For`` (the original client
    when behind a reverse proxy), falling back to the socket address.
    """
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return request.META.get("REMOTE_ADDR", "") or ""
