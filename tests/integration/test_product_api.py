"""Integration tests for Product API endpoints.

Covers:
- CRUD operations via /api/v1/products/.
- Domain exception mapping (404, 409) and body validation (400).
- Authentication enforcement (401 without token).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from django.contrib.auth import get_user_model

from rest_framework.test import APIClient

from modules.products.models import Product

pytestmark = pytest.mark.integration

User = get_user_model()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = User.objects.create_user(username="testuser", password="testpass123")
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def sample_product():
    """A persisted Product instance."""
    product = Product(
        name="T-Shirt",
        brand="Levis",
        price=Decimal("50.00"),
        stock=20,
    )
    product.save()
    return product


def _payload(**overrides):
    payload = {"name": "Jean", "brand": "Levis", "price": "65.00", "stock": 23}
    payload.update(overrides)
    return payload


# ===========================================================================
# Authentication
# ===========================================================================


class TestProductAPIAuth:
    def test_unauthenticated_returns_401(self, api_client):
        response = api_client.get("/api/v1/products/")
        assert response.status_code == 401

    def test_jwt_token_grants_access(self, api_client, sample_product):
        User.objects.create_user(username="jwtuser", password="testpass123")
        token = api_client.post(
            "/api/v1/auth/token/",
            {"username": "jwtuser", "password": "testpass123"},
            format="json",
        ).data["access"]
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        response = api_client.get(f"/api/v1/products/{sample_product.id}/")
        assert response.status_code == 200


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_empty_catalog_returns_404(self, auth_client):
        response = auth_client.get("/api/v1/products/")
        assert response.status_code == 404
        assert "detail" in response.data

    def test_list_returns_products_in_id_order(self, auth_client, sample_product):
        Product.objects.create(name="Jean", brand="Levis", price=Decimal("65.00"), stock=23)
        response = auth_client.get("/api/v1/products/")
        assert response.status_code == 200
        assert [p["name"] for p in response.data] == ["T-Shirt", "Jean"]


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestProductRetrieve:
    def test_retrieve_success(self, auth_client, sample_product):
        response = auth_client.get(f"/api/v1/products/{sample_product.id}/")
        assert response.status_code == 200
        assert response.data["id"] == sample_product.id
        assert response.data["name"] == "T-Shirt"
        assert response.data["brand"] == "Levis"
        assert Decimal(response.data["price"]) == Decimal("50.00")
        assert response.data["stock"] == 20

    def test_retrieve_not_found(self, auth_client):
        response = auth_client.get("/api/v1/products/99/")
        assert response.status_code == 404

    def test_non_numeric_id_not_routed(self, auth_client):
        response = auth_client.get("/api/v1/products/abc/")
        assert response.status_code == 404


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, auth_client):
        response = auth_client.post("/api/v1/products/", _payload(), format="json")
        assert response.status_code == 201
        assert response.data["name"] == "Jean"
        assert response.data["brand"] == "Levis"
        assert Decimal(response.data["price"]) == Decimal("65.00")
        assert Product.objects.filter(id=response.data["id"]).exists()

    def test_create_duplicate_returns_409(self, auth_client, sample_product):
        response = auth_client.post(
            "/api/v1/products/",
            _payload(name="T-Shirt", price="10.00"),
            format="json",
        )
        assert response.status_code == 409
        assert Product.objects.count() == 1

    def test_create_same_name_other_brand_succeeds(self, auth_client, sample_product):
        response = auth_client.post(
            "/api/v1/products/", _payload(name="T-Shirt", brand="Nike"), format="json"
        )
        assert response.status_code == 201

    def test_create_missing_fields_returns_400(self, auth_client):
        response = auth_client.post("/api/v1/products/", {"name": "Incomplete"}, format="json")
        assert response.status_code == 400

    def test_create_negative_price_returns_400(self, auth_client):
        response = auth_client.post(
            "/api/v1/products/", _payload(price="-5.00"), format="json"
        )
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "overrides",
        [
            {"price": "1.239"},
            {"price": "123456789012.00"},
            {"stock": 10**20},
        ],
    )
    def test_create_outside_column_limits_returns_400(self, auth_client, overrides):
        response = auth_client.post(
            "/api/v1/products/", _payload(**overrides), format="json"
        )
        assert response.status_code == 400
        assert not Product.objects.exists()

    def test_create_response_matches_stored_price(self, auth_client):
        response = auth_client.post(
            "/api/v1/products/", _payload(price="12.5"), format="json"
        )
        stored = Product.objects.get(id=response.data["id"])
        assert Decimal(response.data["price"]) == stored.price

    def test_create_non_object_body_returns_400(self, auth_client):
        response = auth_client.post("/api/v1/products/", [1, 2], format="json")
        assert response.status_code == 400


# ===========================================================================
# UPDATE
# ===========================================================================


class TestProductUpdate:
    def test_put_overwrites_all_fields(self, auth_client, sample_product):
        response = auth_client.put(
            f"/api/v1/products/{sample_product.id}/",
            _payload(name="Polo", brand="Lacoste", price="80.00", stock=4),
            format="json",
        )
        assert response.status_code == 200
        assert response.data["id"] == sample_product.id
        sample_product.refresh_from_db()
        assert sample_product.name == "Polo"
        assert sample_product.brand == "Lacoste"
        assert sample_product.price == Decimal("80.00")
        assert sample_product.stock == 4

    def test_update_not_found(self, auth_client):
        response = auth_client.put("/api/v1/products/99/", _payload(), format="json")
        assert response.status_code == 404

    def test_update_invalid_body_returns_400(self, auth_client, sample_product):
        response = auth_client.put(
            f"/api/v1/products/{sample_product.id}/", {"name": "Polo"}, format="json"
        )
        assert response.status_code == 400

    def test_update_non_object_body_returns_400(self, auth_client, sample_product):
        response = auth_client.put(
            f"/api/v1/products/{sample_product.id}/", "T-Shirt", format="json"
        )
        assert response.status_code == 400

    def test_update_into_taken_pair_returns_409(self, auth_client, sample_product):
        other = Product.objects.create(
            name="Jean", brand="Levis", price=Decimal("65.00"), stock=23
        )
        response = auth_client.put(
            f"/api/v1/products/{other.id}/", _payload(name="T-Shirt"), format="json"
        )
        assert response.status_code == 409

    def test_patch_not_allowed(self, auth_client, sample_product):
        response = auth_client.patch(
            f"/api/v1/products/{sample_product.id}/", {"name": "Polo"}, format="json"
        )
        assert response.status_code == 405


# ===========================================================================
# DESTROY
# ===========================================================================


class TestProductDestroy:
    def test_destroy_success(self, auth_client, sample_product):
        response = auth_client.delete(f"/api/v1/products/{sample_product.id}/")
        assert response.status_code == 204
        assert not Product.objects.filter(id=sample_product.id).exists()

    def test_destroy_not_found(self, auth_client):
        response = auth_client.delete("/api/v1/products/99/")
        assert response.status_code == 404
