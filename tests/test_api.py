"""
HTTP tests for the /api endpoints.

They go through the real routers, services and repositories; only the
session dependency is pointed at the per-test in-memory database.
"""
import pytest
from fastapi.testclient import TestClient

from storefront.services.cart_service import MAX_QTY


class TestHealthAndRouting:
    def test_health(self, client: TestClient):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "OK", "message": "Server is running"}

    def test_unknown_route(self, client: TestClient):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Route not found", "code": "not_found"}


class TestProductsEndpoint:
    def test_lists_seeded_catalog(self, client: TestClient):
        response = client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 8
        assert data[0] == {
            "id": 1,
            "name": "Wireless Headphones",
            "price": 79.99,
            "image": "🎧",
        }


class TestCartEndpoints:
    def test_empty_cart(self, client: TestClient):
        response = client.get("/api/cart")

        assert response.status_code == 200
        assert response.json() == {"items": [], "total": 0}

    def test_add_then_get_cart(self, client: TestClient):
        added = client.post("/api/cart", json={"productId": 2, "qty": 2})

        assert added.status_code == 200
        body = added.json()
        assert body["productId"] == 2
        assert body["qty"] == 2
        assert body["message"] == "Item added to cart"
        line_id = body["id"]

        cart = client.get("/api/cart").json()
        assert cart["items"] == [
            {
                "id": line_id,
                "productId": 2,
                "qty": 2,
                "name": "Smart Watch",
                "price": 199.99,
                "image": "⌚",
            }
        ]
        assert cart["total"] == pytest.approx(399.98)

    def test_qty_defaults_to_one_and_accumulates(self, client: TestClient):
        client.post("/api/cart", json={"productId": 1})
        second = client.post("/api/cart", json={"productId": 1})

        assert second.json()["qty"] == 2
        assert second.json()["message"] == "Cart updated"
        assert len(client.get("/api/cart").json()["items"]) == 1

    def test_add_without_product_id(self, client: TestClient):
        response = client.post("/api/cart", json={"qty": 1})

        assert response.status_code == 400
        assert response.json() == {
            "error": "productId is required",
            "code": "invalid_input",
        }

    def test_add_unknown_product(self, client: TestClient):
        response = client.post("/api/cart", json={"productId": 42})

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    def test_add_with_malformed_qty(self, client: TestClient):
        response = client.post("/api/cart", json={"productId": 1, "qty": "lots"})

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_input"

    @pytest.mark.parametrize("qty", [10**20, True, 2.5])
    def test_add_rejects_out_of_range_or_non_integer_qty(self, client: TestClient, qty):
        response = client.post("/api/cart", json={"productId": 1, "qty": qty})

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_input"
        assert client.get("/api/cart").json()["items"] == []

    def test_add_past_maximum_qty(self, client: TestClient):
        client.post("/api/cart", json={"productId": 1, "qty": MAX_QTY})

        response = client.post("/api/cart", json={"productId": 1, "qty": 1})

        assert response.status_code == 400
        assert response.json() == {
            "error": f"Quantity exceeds maximum of {MAX_QTY}",
            "code": "invalid_input",
        }
        assert client.get("/api/cart").json()["items"][0]["qty"] == MAX_QTY

    def test_update_line(self, client: TestClient):
        line_id = client.post("/api/cart", json={"productId": 3}).json()["id"]

        response = client.put(f"/api/cart/{line_id}", json={"qty": 4})

        assert response.status_code == 200
        assert response.json() == {
            "message": "Cart item updated",
            "id": line_id,
            "qty": 4,
        }
        assert client.get("/api/cart").json()["items"][0]["qty"] == 4

    @pytest.mark.parametrize("body", [{"qty": 0}, {"qty": -2}, {"qty": 10**20}, {}])
    def test_update_rejects_invalid_qty(self, client: TestClient, body):
        line_id = client.post("/api/cart", json={"productId": 3}).json()["id"]

        response = client.put(f"/api/cart/{line_id}", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid quantity", "code": "invalid_input"}
        assert client.get("/api/cart").json()["items"][0]["qty"] == 1

    def test_update_rejects_boolean_qty(self, client: TestClient):
        line_id = client.post("/api/cart", json={"productId": 3}).json()["id"]

        response = client.put(f"/api/cart/{line_id}", json={"qty": True})

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_input"

    def test_update_unknown_line(self, client: TestClient):
        response = client.put("/api/cart/999", json={"qty": 2})

        assert response.status_code == 404
        assert response.json() == {"error": "Cart item not found", "code": "not_found"}

    def test_remove_line(self, client: TestClient):
        line_id = client.post("/api/cart", json={"productId": 3}).json()["id"]

        response = client.delete(f"/api/cart/{line_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Item removed from cart", "id": line_id}
        assert client.get("/api/cart").json() == {"items": [], "total": 0}

    def test_remove_unknown_line(self, client: TestClient):
        client.post("/api/cart", json={"productId": 3})

        response = client.delete("/api/cart/999")

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"
        assert len(client.get("/api/cart").json()["items"]) == 1

    def test_clear_cart(self, client: TestClient):
        client.post("/api/cart", json={"productId": 1})
        client.post("/api/cart", json={"productId": 2})

        response = client.delete("/api/cart")

        assert response.status_code == 200
        assert response.json() == {"message": "Cart cleared", "removed": 2}
        assert client.get("/api/cart").json()["items"] == []


class TestCheckoutEndpoint:
    def test_checkout_returns_receipt_and_clears_cart(self, client: TestClient):
        client.post("/api/cart", json={"productId": 7, "qty": 2})
        client.post("/api/cart", json={"productId": 5, "qty": 1})

        response = client.post(
            "/api/checkout", json={"name": "Ada", "email": "ada@example.com"}
        )

        assert response.status_code == 200
        receipt = response.json()
        assert set(receipt) == {
            "orderId",
            "customerName",
            "customerEmail",
            "items",
            "total",
            "timestamp",
        }
        assert receipt["orderId"].startswith("ORD-")
        assert receipt["customerName"] == "Ada"
        assert receipt["customerEmail"] == "ada@example.com"
        assert receipt["items"] == [
            {"name": "Phone Case", "qty": 2, "price": 24.99, "subtotal": 49.98},
            {"name": "USB-C Hub", "qty": 1, "price": 39.99, "subtotal": 39.99},
        ]
        assert receipt["total"] == pytest.approx(89.97)

        assert client.get("/api/cart").json() == {"items": [], "total": 0}

    def test_checkout_empty_cart(self, client: TestClient):
        response = client.post(
            "/api/checkout", json={"name": "Ada", "email": "ada@example.com"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Cart is empty", "code": "empty_cart"}

    def test_checkout_requires_name_and_email(self, client: TestClient):
        client.post("/api/cart", json={"productId": 1})

        response = client.post("/api/checkout", json={"name": "Ada"})

        assert response.status_code == 400
        assert response.json() == {"error": "email is required", "code": "invalid_input"}
        assert len(client.get("/api/cart").json()["items"]) == 1
