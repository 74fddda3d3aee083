"""
Pytest Configuration and Fixtures
Provides shared fixtures and configuration for all tests.
"""
import os

# Settings are read once at import time
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("CREATE_TABLES", "false")

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from commerce_api.api.main import create_app
from commerce_api.core.config import Settings
from commerce_api.data_access import db


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


def pytest_collection_modifyitems(config, items):
    """Mark API tests as integration tests, everything else as unit tests."""
    for item in items:
        if "test_api_" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# Database fixtures
@pytest.fixture
async def database(tmp_path) -> AsyncGenerator[str, None]:
    """Fresh SQLite database file per test, with every table created."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'commerce.db'}"
    db.configure_engine(url, echo=False)
    await db.create_all()
    yield url
    await db.drop_all()
    await db.dispose_engine()


# API fixtures
@pytest.fixture
def app(database):
    return create_app(Settings(environment="testing", create_tables=False))


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


# Payload fixtures
@pytest.fixture
def address_payload() -> dict[str, Any]:
    return {
        "line1": "1 Market Street",
        "postcode": "2000",
        "city": "Sydney",
        "province": "NSW",
        "country": "Australia",
    }


@pytest.fixture
def company_payload(address_payload) -> dict[str, Any]:
    return {"name": "Acme", "email": "a@acme.io", "address": address_payload}


@pytest.fixture
async def company(client, company_payload) -> dict[str, Any]:
    response = await client.post("/companies", json=company_payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def customer_payload(company, address_payload) -> dict[str, Any]:
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@doe.io",
        "companyId": company["id"],
        "address": {**address_payload, "line1": "9 George Street"},
    }


@pytest.fixture
async def customer(client, customer_payload) -> dict[str, Any]:
    response = await client.post("/customers", json=customer_payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def product_payload(company) -> dict[str, Any]:
    return {
        "name": "Widget",
        "description": "A widget",
        "sku": "W-1",
        "price": 250,
        "currency": "AUD",
        "companyId": company["id"],
    }


@pytest.fixture
async def product(client, product_payload) -> dict[str, Any]:
    response = await client.post("/products", json=product_payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def sale_payload(company, customer, product) -> dict[str, Any]:
    return {
        "companyId": company["id"],
        "customerId": customer["id"],
        "comments": "first order",
        "saleItems": [
            {"quantity": 5, "pricePerUnit": 250, "total": 1250, "productId": product["id"]}
        ],
    }


@pytest.fixture
async def sale(client, sale_payload) -> dict[str, Any]:
    response = await client.post("/sales", json=sale_payload)
    assert response.status_code == 201, response.text
    return response.json()
