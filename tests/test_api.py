"""
Component tests for the QuickCart HTTP surface

Requests go through the FastAPI routes, services and repositories with the
JSON collections redirected to tmp_path (see conftest.py).
"""
from datetime import datetime

from fastapi.testclient import TestClient


class TestProducts:
    def test_list_products_default_limit(self, test_client: TestClient):
        response = test_client.get("/products")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total"] == 2
        assert [p["id"] for p in data["products"]] == [1, 2]

    def test_list_products_with_limit(self, test_client: TestClient):
        response = test_client.get("/products", params={"limit": 1})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["products"] == [{"id": 1, "name": "Keyboard", "price": 199.99}]

    def test_invalid_limit_falls_back_to_default(self, test_client: TestClient):
        response = test_client.get("/products", params={"limit": "-3"})

        assert response.status_code == 200
        assert response.json()["total"] == 2

    def test_get_product_returns_stored_record(self, test_client: TestClient):
        response = test_client.get("/products/2")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "product": {"id": 2, "name": "Mouse", "price": 49.5},
        }

    def test_get_missing_product(self, test_client: TestClient):
        response = test_client.get("/products/99")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "product_not_found"}

    def test_get_non_numeric_product_id(self, test_client: TestClient):
        response = test_client.get("/products/abc")

        assert response.status_code == 404
        assert response.json()["error"] == "product_not_found"

    def test_missing_catalog_is_empty(self, test_client: TestClient, products_db):
        products_db.path.unlink()

        response = test_client.get("/products")

        assert response.status_code == 200
        assert response.json() == {"success": True, "total": 0, "products": []}

    def test_corrupted_catalog_is_internal_error(self, test_client: TestClient, products_db):
        products_db.path.write_text("[{broken", encoding="utf-8")

        response = test_client.get("/products")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "internal_server_error"}

    def test_catalog_with_non_object_entry_is_internal_error(self, test_client: TestClient, products_db):
        """
        A catalog record that is not an object is a storage error

        Validates:
        - The failure is answered with the JSON error envelope
        - No plain-text 500 escapes the route
        """
        # Arrange
        products_db.write_all([1, {"id": 2}])

        # Act
        response = test_client.get("/products")

        # Assert
        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "internal_server_error"}


class TestSubmitCart:
    def test_new_cart_is_created(self, test_client: TestClient, carts_db):
        response = test_client.post(
            "/carts",
            json={"customer_id": "u1", "items": [{"product_id": 1, "quantity": 2}]},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["status"] == "saved"
        assert data["message"] == "Cart saved"
        assert data["cart_id"].startswith("CART-")
        assert [r["cart_id"] for r in carts_db.read_all()] == [data["cart_id"]]

    def test_resubmitting_with_returned_id_updates(self, test_client: TestClient, carts_db):
        first = test_client.post(
            "/carts",
            json={"customer_id": "u1", "items": [{"product_id": 1, "quantity": 2}]},
        )
        cart_id = first.json()["cart_id"]
        created_at = carts_db.read_all()[0]["created_at"]

        second = test_client.post(
            "/carts",
            json={"cart_id": cart_id, "customer_id": "u1", "items": [{"product_id": 1, "quantity": 2}]},
        )

        assert first.status_code == 201
        assert second.status_code == 200
        assert second.json()["cart_id"] == cart_id
        assert second.json()["message"] == "Cart updated"

        records = carts_db.read_all()
        assert len(records) == 1
        assert records[0]["created_at"] == created_at

    def test_unknown_product_rejects_whole_cart(self, test_client: TestClient, carts_db):
        response = test_client.post(
            "/carts",
            json={
                "customer_id": "u1",
                "items": [{"product_id": 1, "quantity": 2}, {"product_id": 9, "quantity": 1}],
            },
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "invalid_items",
            "details": [{"index": 1, "reason": "product_not_found", "product_id": 9}],
        }
        assert not carts_db.path.exists()

    def test_missing_customer_id(self, test_client: TestClient):
        response = test_client.post("/carts", json={"items": [{"product_id": 1, "quantity": 1}]})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "missing_customer_id"}

    def test_empty_items(self, test_client: TestClient):
        response = test_client.post("/carts", json={"customer_id": "u1", "items": []})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "items_required"}

    def test_non_object_body_is_treated_as_empty(self, test_client: TestClient):
        response = test_client.post("/carts", json=[1, 2, 3])

        assert response.status_code == 400
        assert response.json()["error"] == "missing_customer_id"

    def test_invalid_json_body(self, test_client: TestClient):
        response = test_client.post(
            "/carts",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "invalid_json"}

    def test_storage_failure_is_internal_error(self, test_client: TestClient, carts_db):
        carts_db.path.parent.mkdir(parents=True, exist_ok=True)
        carts_db.path.write_text("not json at all", encoding="utf-8")

        response = test_client.post(
            "/carts",
            json={"customer_id": "u1", "items": [{"product_id": 1, "quantity": 1}]},
        )

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "internal_server_error"}


class TestListCarts:
    def test_requires_customer_id(self, test_client: TestClient):
        response = test_client.get("/carts")

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "missing_user_id"}

    def test_lists_only_customer_carts(self, test_client: TestClient):
        for customer_id, cart_id in [("u1", "A"), ("u2", "B"), ("u1", "C")]:
            test_client.post(
                "/carts",
                json={"cart_id": cart_id, "customer_id": customer_id, "items": [{"product_id": 2, "quantity": 1}]},
            )

        response = test_client.get("/carts", params={"customer_id": "u1"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total"] == 2
        assert [c["cart_id"] for c in data["carts"]] == ["A", "C"]

        cart = data["carts"][0]
        assert cart["status"] == "saved"
        assert cart["items"] == [{"product_id": 2, "quantity": 1}]
        updated = datetime.fromisoformat(cart["updated_at"].replace("Z", "+00:00"))
        expires = datetime.fromisoformat(cart["expires_at"].replace("Z", "+00:00"))
        assert (expires - updated).days == 7

    def test_malformed_cart_record_is_internal_error(self, test_client: TestClient, carts_db):
        carts_db.write_all([{"cart_id": "A", "customer_id": "u1", "items": "broken"}])

        response = test_client.get("/carts", params={"customer_id": "u1"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "internal_server_error"}

    def test_unknown_customer_has_no_carts(self, test_client: TestClient):
        response = test_client.get("/carts", params={"customer_id": "ghost"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "total": 0, "carts": []}


class TestHealth:
    def test_health(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
