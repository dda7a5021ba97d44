"""
Integration tests for the admin API endpoints.
"""

import pytest
from django.test import override_settings
from django.urls import reverse


@pytest.mark.django_db
@pytest.mark.integration
class TestResetActivationAPI:
    """Integration tests for POST /api/admin/reset-activation."""

    def test_reset_by_order_code(self, api_client, admin_headers, db_activated_order):
        response = api_client.post(
            reverse("reset-activation"),
            {"orderCode": db_activated_order.order_code},
            format="json",
            **admin_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        db_activated_order.refresh_from_db()
        assert not db_activated_order.activation_is_activated
        assert db_activated_order.activation_device_id is None
        assert db_activated_order.activation_activated_at is None
        assert db_activated_order.activation_ip == ""
        assert db_activated_order.status == "PAID"

    def test_reset_by_order_id(self, api_client, admin_headers, db_activated_order):
        response = api_client.post(
            reverse("reset-activation"),
            {"orderId": str(db_activated_order.id)},
            format="json",
            **admin_headers,
        )

        assert response.status_code == 200

    def test_reset_then_activate_again(self, api_client, admin_headers, db_activated_order):
        api_client.post(
            reverse("reset-activation"),
            {"orderCode": db_activated_order.order_code},
            format="json",
            **admin_headers,
        )

        response = api_client.post(
            reverse("activate"),
            {"orderCode": db_activated_order.order_code, "deviceId": "D2"},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["deviceId"] == "D2"

    def test_missing_secret(self, api_client, db_activated_order):
        response = api_client.post(
            reverse("reset-activation"),
            {"orderCode": db_activated_order.order_code},
            format="json",
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_ADMIN_SECRET"
        assert response.json()["error"]["message"] == "Missing or invalid X-Admin-Secret header"
        db_activated_order.refresh_from_db()
        assert db_activated_order.activation_is_activated

    def test_wrong_secret(self, api_client, db_activated_order):
        response = api_client.post(
            reverse("reset-activation"),
            {"orderCode": db_activated_order.order_code},
            format="json",
            HTTP_X_ADMIN_SECRET="wrong",
        )

        assert response.status_code == 401

    @override_settings(ADMIN_API_SECRET="")
    def test_unconfigured_secret_rejects_everything(self, api_client, db_activated_order):
        response = api_client.post(
            reverse("reset-activation"),
            {"orderCode": db_activated_order.order_code},
            format="json",
            HTTP_X_ADMIN_SECRET="",
        )

        assert response.status_code == 401

    def test_rotated_secret_takes_effect(self, api_client, settings, db_activated_order):
        settings.ADMIN_API_SECRET = "rotated-secret"
        payload = {"orderCode": db_activated_order.order_code}
        url = reverse("reset-activation")

        stale = api_client.post(url, payload, format="json", HTTP_X_ADMIN_SECRET="test-admin-secret")
        fresh = api_client.post(url, payload, format="json", HTTP_X_ADMIN_SECRET="rotated-secret")

        assert stale.status_code == 401
        assert fresh.status_code == 200

    def test_missing_identifier(self, api_client, admin_headers):
        response = api_client.post(reverse("reset-activation"), {}, format="json", **admin_headers)

        assert response.status_code == 400

    def test_unknown_order(self, api_client, admin_headers):
        response = api_client.post(
            reverse("reset-activation"), {"orderCode": 424242}, format="json", **admin_headers
        )

        assert response.status_code == 404


@pytest.mark.django_db
@pytest.mark.integration
class TestListOrdersAPI:
    """Integration tests for GET /api/admin/orders."""

    def test_list_orders(self, api_client, admin_headers, db_pending_order, db_activated_order):
        response = api_client.get(reverse("admin-list-orders"), **admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert {o["orderCode"] for o in data} == {
            db_pending_order.order_code,
            db_activated_order.order_code,
        }
        activated = next(o for o in data if o["orderCode"] == db_activated_order.order_code)
        assert activated["isActivated"] is True
        assert activated["deviceId"] == "D1"
        assert activated["catalogItemTitle"] == "Shop Management Source"
        assert activated["amountDisplay"] == "100.000"

    def test_list_orders_limit(self, api_client, admin_headers, db_pending_order, db_paid_order):
        response = api_client.get(reverse("admin-list-orders"), {"limit": 1}, **admin_headers)

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_list_orders_requires_secret(self, api_client):
        response = api_client.get(reverse("admin-list-orders"))

        assert response.status_code == 401
