"""Integration tests for the assembled storefront application."""

import pytest
from fastapi.testclient import TestClient
from shared.db import get_session_factory


@pytest.fixture()
def client(session_factory):
    from app import app

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestApplication:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_browse_then_checkout(self, client):
        product = client.post(
            "/products", json={"name": "Mustard Honey", "category": "Honey", "price": 420, "stock": 3}
        ).json()

        listed = client.get("/products").json()
        assert [row["product_id"] for row in listed] == [product["product_id"]]

        response = client.post(
            "/orders",
            json={
                "customerName": "Rahim Uddin",
                "customerPhone": "01711-000000",
                "customerAddress": "12 Lake Road, Dhaka",
                "totalAmount": 840,
                "items": [{"product_id": product["product_id"], "quantity": 2, "price": 420}],
            },
            headers={"X-Request-ID": "checkout-1"},
        )
        assert response.status_code == 201

        assert client.get("/products").json()[0]["stock_quantity"] == 1
        assert client.get("/orders").json()[0]["order_id"] == response.json()["order_id"]
