"""
API tests for the sale aggregate and its status lifecycle.
"""
import pytest

from commerce_api.data_access.models import SaleItem
from commerce_api.data_access.patterns import unit_of_work


@pytest.fixture
async def second_product(client, product_payload):
    response = await client.post(
        "/products", json={**product_payload, "sku": "W-2", "price": 150}
    )
    assert response.status_code == 201
    return response.json()


class TestSaleCreate:
    """Test derived totals and cross-entity checks."""

    async def test_total_is_sum_of_item_totals(self, client, sale_payload, product, second_product):
        payload = {
            **sale_payload,
            "saleItems": [
                {"quantity": 2, "pricePerUnit": 250, "total": 500, "productId": product["id"]},
                {"quantity": 5, "pricePerUnit": 150, "total": 750, "productId": second_product["id"]},
            ],
        }
        response = await client.post("/sales", json=payload)

        assert response.status_code == 201
        body = response.json()
        assert body["id"].startswith("sal_")
        assert body["total"] == 1250
        assert body["statusCode"] == "CREATED"
        assert sorted(item["total"] for item in body["saleItems"]) == [500, 750]
        assert all(item["id"].startswith("sai_") for item in body["saleItems"])

    async def test_status_and_total_cannot_be_supplied(self, client, sale_payload):
        response = await client.post(
            "/sales", json={**sale_payload, "statusCode": "PAID", "total": 1}
        )

        assert response.status_code == 201
        assert response.json()["statusCode"] == "CREATED"
        assert response.json()["total"] == 1250

    async def test_products_from_two_companies(self, client, sale_payload, company_payload, product_payload):
        other = await client.post("/companies", json={**company_payload, "email": "b@other.io"})
        foreign = await client.post(
            "/products", json={**product_payload, "companyId": other.json()["id"]}
        )
        payload = {
            **sale_payload,
            "saleItems": [
                *sale_payload["saleItems"],
                {"quantity": 1, "pricePerUnit": 250, "total": 250, "productId": foreign.json()["id"]},
            ],
        }

        response = await client.post("/sales", json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Cannot create Sale. Products must belong only to a single Company."
        )
        assert (await client.get("/sales")).json() == []

    async def test_products_of_another_company(self, client, sale_payload, company_payload):
        other = await client.post("/companies", json={**company_payload, "email": "b@other.io"})

        response = await client.post(
            "/sales", json={**sale_payload, "companyId": other.json()["id"]}
        )

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Cannot create Sale. Products must belong same Company as Customer."
        )

    async def test_item_total_mismatch(self, client, sale_payload, product):
        payload = {
            **sale_payload,
            "saleItems": [
                {"quantity": 5, "pricePerUnit": 250, "total": 1000, "productId": product["id"]}
            ],
        }
        response = await client.post("/sales", json=payload)

        assert response.status_code == 400
        assert response.json()["params"] == {
            "saleItems.0.total": "saleItems.0.total must equal quantity * pricePerUnit (1250)"
        }

    async def test_item_validation_paths(self, client, sale_payload):
        payload = {
            **sale_payload,
            "saleItems": [{"quantity": 0, "pricePerUnit": 1, "total": 0, "productId": "pro_bad"}],
        }
        response = await client.post("/sales", json=payload)

        assert response.status_code == 400
        assert response.json()["params"] == {
            "saleItems.0.quantity": "quantity must not be less than 1",
            "saleItems.0.productId": "productId is not a valid resource ID",
        }

    async def test_empty_items(self, client, sale_payload):
        response = await client.post("/sales", json={**sale_payload, "saleItems": []})

        assert response.status_code == 400
        assert response.json()["params"] == {"saleItems": "saleItems should not be empty"}


class TestSaleStatusLifecycle:
    """Test the pay, cancel and refund actions."""

    async def test_pay_then_refund(self, client, sale):
        paid = await client.post(f"/sales/{sale['id']}/pay")
        assert paid.status_code == 200
        assert paid.json()["statusCode"] == "PAID"

        refunded = await client.post(f"/sales/{sale['id']}/refund")
        assert refunded.status_code == 200
        assert refunded.json()["statusCode"] == "REFUNDED"

    async def test_refund_from_created(self, client, sale):
        response = await client.post(f"/sales/{sale['id']}/refund")

        assert response.status_code == 400
        assert response.json()["params"] == {"statusCode": "statusCode is 'CREATED'"}

    async def test_cancel_from_paid(self, client, sale):
        await client.post(f"/sales/{sale['id']}/pay")

        response = await client.post(f"/sales/{sale['id']}/cancel")

        assert response.status_code == 400
        assert response.json()["message"] == (
            f"Cannot cancel sale '{sale['id']}', its status is not 'CREATED'."
        )

    @pytest.mark.parametrize("action", ["pay", "cancel", "refund"])
    async def test_cancelled_is_terminal(self, client, sale, action):
        cancelled = await client.post(f"/sales/{sale['id']}/cancel")
        assert cancelled.json()["statusCode"] == "CANCELLED"

        response = await client.post(f"/sales/{sale['id']}/{action}")
        assert response.status_code == 400

    async def test_unknown_sale(self, client):
        response = await client.post("/sales/sal_" + "q" * 21 + "/pay")
        assert response.status_code == 404


class TestSaleMaintenance:
    """Test comment updates, deletion and listing."""

    async def test_update_comments_only(self, client, sale):
        response = await client.patch(
            f"/sales/{sale['id']}", json={"comments": "gift wrap", "statusCode": "PAID"}
        )

        assert response.status_code == 200
        assert response.json()["comments"] == "gift wrap"
        assert response.json()["statusCode"] == "CREATED"

    async def test_clear_comments(self, client, sale):
        response = await client.patch(f"/sales/{sale['id']}", json={"comments": None})
        assert response.json()["comments"] is None

    async def test_delete_removes_items(self, client, sale):
        response = await client.delete(f"/sales/{sale['id']}")
        assert response.status_code == 204

        async with unit_of_work() as uow:
            assert await uow.find(SaleItem) == []
        assert (await client.get(f"/sales/{sale['id']}")).status_code == 404

    async def test_list_by_status(self, client, sale, sale_payload):
        second = await client.post("/sales", json=sale_payload)
        await client.post(f"/sales/{second.json()['id']}/pay")

        paid = await client.request("GET", "/sales", json={"statusCode": "PAID"})
        created = await client.request("GET", "/sales", json={"statusCode": "CREATED"})

        assert [item["id"] for item in paid.json()] == [second.json()["id"]]
        assert [item["id"] for item in created.json()] == [sale["id"]]

    async def test_list_rejects_unknown_status(self, client):
        response = await client.request("GET", "/sales", json={"statusCode": "LOST"})
        assert response.status_code == 400
