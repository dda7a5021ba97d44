"""
Integration tests for the store API and health endpoints.
"""

import uuid

import pytest
from django.urls import reverse


@pytest.mark.django_db
@pytest.mark.integration
class TestCatalogAPI:
    """Integration tests for the catalog endpoints."""

    def test_list_catalog(self, api_client, db_catalog_item):
        response = api_client.get(reverse("catalog-list"))

        assert response.status_code == 200
        (item,) = response.json()
        assert item["id"] == str(db_catalog_item.id)
        assert item["title"] == "Shop Management Source"
        assert item["priceVND"] == 100000
        assert item["priceDisplay"] == "100.000"

    def test_catalog_never_exposes_drive_link(self, api_client, db_catalog_item):
        listing = api_client.get(reverse("catalog-list")).json()[0]
        detail = api_client.get(reverse("catalog-detail", args=[db_catalog_item.id])).json()

        assert "driveLink" not in listing
        assert "driveLink" not in detail
        assert db_catalog_item.drive_link not in str(listing)

    def test_catalog_detail_missing(self, api_client):
        response = api_client.get(reverse("catalog-detail", args=[uuid.uuid4()]))

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CATALOG_ITEM_NOT_FOUND"


@pytest.mark.django_db
@pytest.mark.integration
class TestOrderStatusAPI:
    """Integration tests for GET /api/order/<id>."""

    def test_pending(self, api_client, db_pending_order):
        response = api_client.get(reverse("order-status", args=[db_pending_order.id]))

        assert response.status_code == 200
        assert response.json() == {"status": "PENDING"}

    def test_paid(self, api_client, db_paid_order):
        response = api_client.get(reverse("order-status", args=[db_paid_order.id]))

        assert response.json() == {"status": "PAID"}

    def test_missing(self, api_client):
        response = api_client.get(reverse("order-status", args=[uuid.uuid4()]))

        assert response.status_code == 404


@pytest.mark.django_db
@pytest.mark.integration
class TestHealthEndpoints:
    def test_health(self, client):
        response = client.get(reverse("health"))

        assert response.status_code == 200
        assert response.json()["service"] == "source-code-store"

    def test_ready(self, client):
        response = client.get(reverse("ready"))

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True, "cache": True}

    def test_observability_headers(self, api_client, db_pending_order):
        response = api_client.get(
            reverse("order-status", args=[db_pending_order.id]),
            HTTP_X_CORRELATION_ID="corr-123",
        )

        assert response["X-Correlation-ID"] == "corr-123"
        assert "X-Request-Duration" in response
