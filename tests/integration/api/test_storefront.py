"""
Integration tests for the storefront order flow.
"""

import uuid
from urllib.parse import parse_qs, urlparse

import pytest
from django.urls import reverse

from api import dependencies
from core.domain.exceptions import OrderCodeCollisionError
from orders.infrastructure.models import Order
from tests.fakes import FakePaymentGateway


@pytest.fixture
def gateway(monkeypatch, fake_gateway):
    monkeypatch.setattr(dependencies, "payment_gateway", lambda: fake_gateway)
    return fake_gateway


@pytest.mark.django_db
@pytest.mark.integration
class TestPlaceOrder:
    """Integration tests for POST /order."""

    def test_place_order_redirects_to_checkout(self, api_client, gateway, db_catalog_item):
        response = api_client.post(
            reverse("place-order"),
            {"name": "Nguyen Van A", "email": "a@example.com", "codeId": str(db_catalog_item.id)},
            format="json",
        )

        assert response.status_code == 302
        order = Order.objects.get()
        assert response["Location"] == order.checkout_url
        assert order.status == Order.Status.PENDING
        assert order.amount == 100000
        assert order.payment_link_id == f"plink-{order.order_code}"
        assert order.buyer_email == "a@example.com"

        request = gateway.requests[0]
        return_url = urlparse(request.return_url)
        assert return_url.path == f"/order/{order.id}/success"
        assert parse_qs(return_url.query)["orderCode"] == [str(order.order_code)]

    def test_place_order_from_form(self, client, gateway, db_catalog_item):
        response = client.post(
            reverse("place-order"),
            {"name": "Buyer", "email": "buyer@example.com", "codeId": str(db_catalog_item.id)},
        )

        assert response.status_code == 302
        assert Order.objects.count() == 1

    def test_order_snapshots_price(self, api_client, gateway, db_catalog_item):
        api_client.post(
            reverse("place-order"),
            {"name": "Buyer", "email": "buyer@example.com", "codeId": str(db_catalog_item.id)},
            format="json",
        )
        db_catalog_item.price_vnd = 999000
        db_catalog_item.save()

        assert Order.objects.get().amount == 100000

    def test_unknown_item(self, api_client, gateway):
        response = api_client.post(
            reverse("place-order"),
            {"name": "Buyer", "email": "buyer@example.com", "codeId": str(uuid.uuid4())},
            format="json",
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CATALOG_ITEM_NOT_FOUND"
        assert not Order.objects.exists()

    def test_provider_failure(self, api_client, monkeypatch, db_catalog_item):
        monkeypatch.setattr(dependencies, "payment_gateway", lambda: FakePaymentGateway(fail=True))

        response = api_client.post(
            reverse("place-order"),
            {"name": "Buyer", "email": "buyer@example.com", "codeId": str(db_catalog_item.id)},
            format="json",
        )

        assert response.status_code == 502
        assert response.json()["error"]["message"] == "Could not create the order or payment link"
        order = Order.objects.get()
        assert order.status == Order.Status.PENDING
        assert order.checkout_url == ""

    def test_order_code_exhaustion(self, api_client, gateway, monkeypatch, db_catalog_item):
        async def always_collide(order):
            raise OrderCodeCollisionError()

        monkeypatch.setattr(dependencies.order_repository(), "create", always_collide)

        response = api_client.post(
            reverse("place-order"),
            {"name": "Buyer", "email": "buyer@example.com", "codeId": str(db_catalog_item.id)},
            format="json",
        )

        assert response.status_code == 500
        assert response.json()["error"] == {
            "code": "ORDER_CODE_COLLISION",
            "message": "Could not create the order",
        }
        assert gateway.requests == []

    def test_invalid_payload(self, api_client, gateway):
        response = api_client.post(
            reverse("place-order"), {"name": "Buyer", "email": "not-an-email"}, format="json"
        )

        assert response.status_code == 400
        errors = response.json()["error"]
        assert "email" in errors
        assert "codeId" in errors


@pytest.mark.django_db
@pytest.mark.integration
class TestOrderReturn:
    """Integration tests for the provider return endpoints."""

    def test_signed_return_marks_paid(self, api_client, signer, db_pending_order):
        code = db_pending_order.order_code

        response = api_client.get(
            reverse("order-success", args=[db_pending_order.id]),
            {"orderCode": code, "status": "PAID", "sig": signer.sign(code, "PAID")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["order"]["status"] == "PAID"
        assert data["order"]["paidAt"] is not None
        assert data["order"]["catalogItemTitle"] == "Shop Management Source"
        db_pending_order.refresh_from_db()
        assert db_pending_order.status == Order.Status.PAID
        assert db_pending_order.paid_at is not None

    def test_bad_signature_renders_pending(self, api_client, db_pending_order):
        response = api_client.get(
            reverse("order-success", args=[db_pending_order.id]),
            {"orderCode": db_pending_order.order_code, "status": "PAID", "sig": "forged"},
        )

        assert response.status_code == 200
        assert response.json()["order"]["status"] == "PENDING"
        db_pending_order.refresh_from_db()
        assert db_pending_order.status == Order.Status.PENDING

    def test_signature_from_other_order_rejected(
        self, api_client, signer, db_pending_order, db_paid_order
    ):
        other_code = db_paid_order.order_code

        response = api_client.get(
            reverse("order-success", args=[db_pending_order.id]),
            {"orderCode": other_code, "status": "PAID", "sig": signer.sign(other_code, "PAID")},
        )

        assert response.status_code == 200
        assert response.json()["order"]["status"] == "PENDING"

    def test_missing_query_renders_pending(self, api_client, db_pending_order):
        response = api_client.get(reverse("order-success", args=[db_pending_order.id]))

        assert response.status_code == 200
        assert response.json()["order"]["status"] == "PENDING"

    def test_missing_checksum_key_renders_pending(self, api_client, settings, db_pending_order):
        settings.PAYOS_CHECKSUM_KEY = ""

        response = api_client.get(
            reverse("order-success", args=[db_pending_order.id]),
            {"orderCode": db_pending_order.order_code, "status": "PAID", "sig": "abc"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["order"]["status"] == "PENDING"
        db_pending_order.refresh_from_db()
        assert db_pending_order.status == Order.Status.PENDING

    def test_repeated_return_keeps_paid_at(self, api_client, signer, db_paid_order):
        paid_at = db_paid_order.paid_at
        code = db_paid_order.order_code

        api_client.get(
            reverse("order-success", args=[db_paid_order.id]),
            {"orderCode": code, "status": "PAID", "sig": signer.sign(code, "PAID")},
        )

        db_paid_order.refresh_from_db()
        assert db_paid_order.paid_at == paid_at

    def test_unknown_order(self, api_client):
        response = api_client.get(reverse("order-success", args=[uuid.uuid4()]))

        assert response.status_code == 404

    def test_cancel(self, api_client, db_pending_order):
        response = api_client.get(reverse("order-cancel", args=[db_pending_order.id]))

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is False
        assert data["order"]["status"] == "PENDING"
        assert data["order"]["orderCode"] == db_pending_order.order_code
