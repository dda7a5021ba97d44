"""
Prometheus metrics for the store.

Custom metrics for the order lifecycle and the license API.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Order metrics
orders_placed_total = Counter(
    "orders_placed_total",
    "Total orders placed",
)

orders_paid_total = Counter(
    "orders_paid_total",
    "Total orders transitioned to PAID",
    ["source"],
)

checkout_sessions_failed_total = Counter(
    "checkout_sessions_failed_total",
    "Checkout session requests rejected or failed at the payment provider",
)

payment_provider_duration_seconds = Histogram(
    "payment_provider_duration_seconds",
    "Payment provider request duration in seconds",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

return_signatures_rejected_total = Counter(
    "return_signatures_rejected_total",
    "Return-trip callbacks whose signature or status did not verify",
)

# Activation metrics
activations_total = Counter(
    "activations_total",
    "Total successful first activations",
)

activation_resets_total = Counter(
    "activation_resets_total",
    "Total activation resets performed by admins",
)

activation_conflicts_total = Counter(
    "activation_conflicts_total",
    "Activate calls rejected because the order was already activated",
)

validations_total = Counter(
    "validations_total",
    "License validation calls by outcome",
    ["result"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
