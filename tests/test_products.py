"""Tests for the product CRUD routes."""

import pytest


def create(client, payload):
    response = client.post("/products", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["id"]


class TestCreateProduct:
    """POST /products."""

    def test_create_returns_id_and_message(self, client, widget):
        response = client.post("/products", json=widget)

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["message"]

    def test_create_then_read_round_trip(self, client, widget):
        product_id = create(client, widget)

        response = client.get(f"/test/check-db/{product_id}")

        assert response.status_code == 200
        assert response.json() == {"id": product_id, **widget}

    def test_ids_increase(self, client, widget):
        first = create(client, widget)
        second = create(client, widget)
        assert second > first

    def test_integer_price_is_accepted(self, client):
        product_id = create(client, {"name": "Bolt", "price": 2, "quantity": 0})
        assert client.get(f"/test/check-db/{product_id}").json()["price"] == 2

    def test_name_is_stored_as_submitted(self, client):
        product_id = create(client, {"name": "  Gear  ", "price": 1.5, "quantity": 1})
        assert client.get(f"/test/check-db/{product_id}").json()["name"] == "  Gear  "

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "  ", "price": 9.99, "quantity": 5},
            {"name": "", "price": 9.99, "quantity": 5},
            {"name": "ab", "price": 9.99, "quantity": 5},
            {"name": " ab ", "price": 9.99, "quantity": 5},
            {"name": "Widget", "price": 0, "quantity": 5},
            {"name": "Widget", "price": -1.5, "quantity": 5},
            {"name": "Widget", "price": "9.99", "quantity": 5},
            {"name": "Widget", "price": 9.99, "quantity": -1},
            {"name": "Widget", "price": 9.99, "quantity": 2.5},
            {"name": "Widget", "price": 9.99, "quantity": "5"},
            {"name": "Widget", "price": 0.001, "quantity": 5},
            {"name": "Widget", "price": 1e12, "quantity": 5},
            {"name": "Widget", "price": 9.99, "quantity": 1099511627776},
            {"name": 123, "price": 9.99, "quantity": 5},
            {"price": 9.99, "quantity": 5},
            {"name": "Widget", "quantity": 5},
            {"name": "Widget", "price": 9.99},
        ],
    )
    def test_invalid_payload_is_rejected_without_insert(self, client, row_count, payload):
        response = client.post("/products", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"
        assert row_count() == 0

    def test_validation_error_names_the_field(self, client):
        response = client.post("/products", json={"name": "Widget", "price": 0, "quantity": 5})

        fields = [detail["field"] for detail in response.json()["details"]]
        assert fields == ["price"]

    def test_malformed_json_is_rejected(self, client, row_count):
        response = client.post(
            "/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert row_count() == 0


class TestUpdateProduct:
    """PUT /products/{id}."""

    def test_update_replaces_all_fields(self, client, widget):
        product_id = create(client, widget)
        changes = {"name": "Widget Pro", "price": 12.50, "quantity": 3}

        response = client.put(f"/products/{product_id}", json=changes)

        assert response.status_code == 200
        assert response.json()["message"]
        assert client.get(f"/test/check-db/{product_id}").json() == {"id": product_id, **changes}

    def test_update_missing_product_returns_404(self, client, row_count, widget):
        response = client.put("/products/9999", json=widget)

        assert response.status_code == 404
        assert "error" in response.json()
        assert row_count() == 0

    def test_update_with_invalid_payload_keeps_row(self, client, widget):
        product_id = create(client, widget)

        response = client.put(f"/products/{product_id}", json={"name": "   ", "price": 1.0, "quantity": 1})

        assert response.status_code == 400
        assert client.get(f"/test/check-db/{product_id}").json()["name"] == "Widget"

    def test_update_with_non_integer_id_is_rejected(self, client, widget):
        response = client.put("/products/abc", json=widget)
        assert response.status_code == 400


class TestDeleteProduct:
    """DELETE /products/{id}."""

    def test_delete_then_read_returns_404(self, client, widget):
        product_id = create(client, widget)

        response = client.delete(f"/products/{product_id}")

        assert response.status_code == 200
        assert str(product_id) in response.json()["message"]
        assert client.get(f"/test/check-db/{product_id}").status_code == 404

    def test_delete_twice_returns_404(self, client, widget):
        product_id = create(client, widget)
        client.delete(f"/products/{product_id}")

        response = client.delete(f"/products/{product_id}")

        assert response.status_code == 404
        assert "error" in response.json()

    def test_delete_missing_product_leaves_rows(self, client, row_count, widget):
        create(client, widget)

        response = client.delete("/products/9999")

        assert response.status_code == 404
        assert row_count() == 1


def test_full_lifecycle(client):
    """Create, read, update, re-read, delete, re-read."""
    response = client.post("/products", json={"name": "Widget", "price": 9.99, "quantity": 5})
    assert response.status_code == 201
    product_id = response.json()["id"]

    response = client.get(f"/test/check-db/{product_id}")
    assert response.status_code == 200
    assert response.json() == {"id": product_id, "name": "Widget", "price": 9.99, "quantity": 5}

    response = client.put(f"/products/{product_id}", json={"name": "Widget Pro", "price": 12.50, "quantity": 3})
    assert response.status_code == 200

    response = client.get(f"/test/check-db/{product_id}")
    assert response.json() == {"id": product_id, "name": "Widget Pro", "price": 12.5, "quantity": 3}

    assert client.delete(f"/products/{product_id}").status_code == 200
    assert client.get(f"/test/check-db/{product_id}").status_code == 404
