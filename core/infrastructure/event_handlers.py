"""
Event handlers for domain events.

These handlers process domain events for side effects
like audit logging and business metrics.
"""

import logging

from activations.domain.events import ActivationReset, OrderActivated
from core.domain.events import DomainEvent, EventHandler
from core.metrics import (
    activation_resets_total,
    activations_total,
    orders_paid_total,
    orders_placed_total,
)
from orders.domain.events import OrderPaid, OrderPlaced

logger = logging.getLogger(__name__)


class AuditLogEventHandler(EventHandler):
    """Writes every domain event to the ``audit`` log stream."""

    audit_logger = logging.getLogger("audit")

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        self.audit_logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )


class MetricsEventHandler(EventHandler):
    """Counts business events in Prometheus."""

    async def handle(self, event: DomainEvent) -> None:
        if isinstance(event, OrderPlaced):
            orders_placed_total.inc()
        elif isinstance(event, OrderPaid):
            orders_paid_total.labels(source=event.source).inc()
        elif isinstance(event, OrderActivated):
            activations_total.inc()
        elif isinstance(event, ActivationReset):
            activation_resets_total.inc()


def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    audit_handler = AuditLogEventHandler()
    metrics_handler = MetricsEventHandler()

    for event_type in (OrderPlaced, OrderPaid, OrderActivated, ActivationReset):
        event_bus.subscribe(event_type, audit_handler)
        event_bus.subscribe(event_type, metrics_handler)

    logger.info("Event handlers registered")
