"""
API tests for products.
"""


class TestProducts:
    """Test product CRUD and constraints."""

    async def test_create_and_get(self, client, product_payload):
        created = await client.post("/products", json=product_payload)

        assert created.status_code == 201
        body = created.json()
        assert body["id"].startswith("pro_")
        assert body["price"] == 250
        assert body["currency"] == "AUD"

        fetched = await client.get(f"/products/{body['id']}")
        assert fetched.json() == body

    async def test_description_is_optional_and_nullable(self, client, product_payload):
        payload = {key: value for key, value in product_payload.items() if key != "description"}
        response = await client.post("/products", json=payload)
        assert response.status_code == 201
        assert response.json()["description"] is None

        response = await client.post(
            "/products", json={**product_payload, "sku": "W-2", "description": None}
        )
        assert response.status_code == 201

    async def test_invalid_amount_and_currency(self, client, product_payload):
        response = await client.post(
            "/products", json={**product_payload, "price": -5, "currency": "ZZZ"}
        )

        assert response.status_code == 400
        assert response.json()["params"] == {
            "price": "price must be 0 or a positive integer up to 99 999 999",
            "currency": "currency must be a valid ISO 4217 currency code",
        }

    async def test_duplicate_sku_per_company(self, client, product_payload, product):
        response = await client.post("/products", json=product_payload)
        assert response.status_code == 409

    async def test_update(self, client, product):
        response = await client.patch(
            f"/products/{product['id']}", json={"price": 300, "description": None}
        )

        assert response.status_code == 200
        assert response.json()["price"] == 300
        assert response.json()["description"] is None
        assert response.json()["sku"] == product["sku"]

    async def test_delete(self, client, product):
        assert (await client.delete(f"/products/{product['id']}")).status_code == 204
        assert (await client.delete(f"/products/{product['id']}")).status_code == 404

    async def test_list_filters(self, client, product_payload, product):
        await client.post("/products", json={**product_payload, "sku": "W-2", "currency": "EUR"})

        response = await client.request("GET", "/products", json={"currency": "EUR"})

        assert [item["sku"] for item in response.json()] == ["W-2"]
