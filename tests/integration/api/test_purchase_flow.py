"""
End-to-end purchase flow: order, pay, activate, validate.
"""

from urllib.parse import urlparse

import pytest
from django.urls import reverse

from api import dependencies
from orders.infrastructure.models import Order


@pytest.mark.django_db
@pytest.mark.integration
def test_purchase_to_activation(api_client, monkeypatch, fake_gateway, db_catalog_item):
    monkeypatch.setattr(dependencies, "payment_gateway", lambda: fake_gateway)

    response = api_client.post(
        reverse("place-order"),
        {"name": "Buyer", "email": "buyer@example.com", "codeId": str(db_catalog_item.id)},
        format="json",
    )
    assert response.status_code == 302

    order = Order.objects.get()
    assert order.status == Order.Status.PENDING
    assert order.checkout_url == response["Location"]

    # Provider sends the buyer back to the signed return URL
    return_url = urlparse(fake_gateway.requests[0].return_url)
    response = api_client.get(f"{return_url.path}?{return_url.query}")
    assert response.status_code == 200
    assert response.json()["order"]["status"] == "PAID"

    order.refresh_from_db()
    assert order.status == Order.Status.PAID
    assert order.paid_at is not None

    response = api_client.post(
        reverse("activate"), {"orderCode": order.order_code, "deviceId": "dev-123"}, format="json"
    )
    assert response.status_code == 200
    assert response.json()["driveLink"] == db_catalog_item.drive_link

    response = api_client.post(
        reverse("validate"), {"orderCode": order.order_code, "deviceId": "dev-123"}, format="json"
    )
    assert response.status_code == 200
    assert response.json()["ok"] is True

    response = api_client.post(
        reverse("validate"), {"orderCode": order.order_code, "deviceId": "dev-999"}, format="json"
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "DEVICE_MISMATCH"

    response = api_client.get(reverse("order-status", args=[order.id]))
    assert response.json() == {"status": "PAID"}


@pytest.mark.django_db
@pytest.mark.integration
def test_unpaid_order_cannot_activate(api_client, monkeypatch, fake_gateway, db_catalog_item):
    monkeypatch.setattr(dependencies, "payment_gateway", lambda: fake_gateway)
    api_client.post(
        reverse("place-order"),
        {"name": "Buyer", "email": "buyer@example.com", "codeId": str(db_catalog_item.id)},
        format="json",
    )
    order = Order.objects.get()

    # Cancel leaves the order unpaid
    cancel = urlparse(fake_gateway.requests[0].cancel_url)
    assert api_client.get(cancel.path).json()["ok"] is False

    response = api_client.post(
        reverse("activate"), {"orderCode": order.order_code, "deviceId": "dev-123"}, format="json"
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "ORDER_NOT_PAID"
