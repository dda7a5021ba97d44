"""
Back-office order actions.

Single-order endpoints used from the admin order list. Both require a
logged-in staff session and redirect back to the list.
"""

import logging
import uuid

from asgiref.sync import async_to_sync
from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.http import Http404, HttpResponseRedirect
from django.urls import reverse
from django.views.decorators.http import require_POST

from activations.application.commands.reset_activation import ResetActivationCommand
from activations.application.handlers.reset_activation_handler import ResetActivationHandler
from api import dependencies
from core.domain.exceptions import OrderNotFoundError
from orders.application.commands.mark_order_paid import MarkOrderPaidCommand
from orders.application.handlers.order_handlers import MarkOrderPaidHandler

logger = logging.getLogger(__name__)


def _order_list_url() -> str:
    return reverse("admin:orders_order_changelist")


@staff_member_required
@require_POST
def mark_order_paid(request, order_id: uuid.UUID):
    """Mark one order as PAID by hand."""
    handler = MarkOrderPaidHandler(order_repository=dependencies.order_repository())
    try:
        transitioned = async_to_sync(handler.handle)(MarkOrderPaidCommand(order_id=order_id))
    except OrderNotFoundError as e:
        raise Http404(e.message) from e

    if transitioned:
        messages.success(request, "Order marked as paid.")
    else:
        messages.info(request, "Order was already paid.")
    logger.info("Staff %s marked order %s paid", request.user.get_username(), order_id)
    return HttpResponseRedirect(_order_list_url())


@staff_member_required
@require_POST
def reset_activation(request, order_id: uuid.UUID):
    """Clear the activation of one order."""
    handler = ResetActivationHandler(order_repository=dependencies.order_repository())
    try:
        async_to_sync(handler.handle)(ResetActivationCommand(order_id=order_id))
    except OrderNotFoundError as e:
        raise Http404(e.message) from e

    messages.success(request, "Activation reset.")
    logger.info("Staff %s reset activation of order %s", request.user.get_username(), order_id)
    return HttpResponseRedirect(_order_list_url())
