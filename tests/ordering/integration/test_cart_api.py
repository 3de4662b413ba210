"""Integration tests for cart endpoints via TestClient."""

HEADERS = {"X-Customer-ID": "cust-api-001"}


class TestCartAPI:
    def test_new_cart_is_empty(self, client):
        response = client.get("/cart", headers=HEADERS)
        assert response.status_code == 200
        data = response.json()
        assert data["lines"] == []
        assert data["total"] == "0.00"

    def test_add_and_view(self, client, create_product):
        avocado = create_product(name="Avocado box", price="12.50")
        coffee = create_product(name="Coffee beans", price="10.75")
        client.post("/cart/items", headers=HEADERS, json={"product_id": avocado, "quantity": 2})
        client.post("/cart/items", headers=HEADERS, json={"product_id": coffee, "quantity": 1})

        data = client.get("/cart", headers=HEADERS).json()

        assert data["total"] == "35.75"
        assert data["item_count"] == 3

    def test_add_more_than_stock_is_400(self, client, create_product):
        product_id = create_product(stock=3)
        response = client.post("/cart/items", headers=HEADERS, json={"product_id": product_id, "quantity": 4})
        assert response.status_code == 400
        assert response.json()["error"] == {"quantity": ["Only 3 items available"]}

    def test_add_unknown_product_is_400(self, client):
        response = client.post("/cart/items", headers=HEADERS, json={"product_id": "missing", "quantity": 1})
        assert response.status_code == 400

    def test_update_quantity(self, client, create_product):
        product_id = create_product()
        client.post("/cart/items", headers=HEADERS, json={"product_id": product_id, "quantity": 1})

        response = client.put(f"/cart/items/{product_id}", headers=HEADERS, json={"quantity": 4})

        assert response.status_code == 200
        assert client.get("/cart", headers=HEADERS).json()["lines"][0]["quantity"] == 4

    def test_update_missing_line_is_404(self, client):
        response = client.put("/cart/items/prod-404", headers=HEADERS, json={"quantity": 2})
        assert response.status_code == 404

    def test_remove_line(self, client, create_product):
        product_id = create_product()
        client.post("/cart/items", headers=HEADERS, json={"product_id": product_id, "quantity": 1})

        response = client.delete(f"/cart/items/{product_id}", headers=HEADERS)

        assert response.status_code == 200
        assert client.get("/cart", headers=HEADERS).json()["lines"] == []

    def test_remove_missing_line_is_404(self, client):
        response = client.delete("/cart/items/prod-404", headers=HEADERS)
        assert response.status_code == 404

    def test_clear(self, client, create_product):
        product_id = create_product()
        client.post("/cart/items", headers=HEADERS, json={"product_id": product_id, "quantity": 1})
        assert client.delete("/cart", headers=HEADERS).status_code == 200
        assert client.get("/cart", headers=HEADERS).json()["lines"] == []

    def test_customer_header_required(self, client):
        assert client.get("/cart").status_code == 422
