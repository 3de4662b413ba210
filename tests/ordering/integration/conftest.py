import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from ordering.api import cart_router, category_router, customer_router, order_router, product_router
from ordering.api.errors import register_error_handlers
from ordering.domain import ordering


@pytest.fixture()
def client():
    app = FastAPI()

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        with ordering.domain_context():
            return await call_next(request)

    for router in (product_router, category_router, cart_router, customer_router, order_router):
        app.include_router(router)
    register_error_handlers(app)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def shopper(client):
    """A registered customer with one address; returns (headers, address_id)."""
    response = client.post(
        "/customers",
        json={"name": "Ana Torres", "email": "ana@example.com", "phone": "+51 999 000 111"},
    )
    assert response.status_code == 201
    headers = {"X-Customer-ID": response.json()["customer_id"]}

    response = client.post(
        "/addresses",
        headers=headers,
        json={"street": "Av. Arequipa 123", "city": "Lima", "postal_code": "15001", "country": "PE"},
    )
    assert response.status_code == 201
    return headers, response.json()["address_id"]


@pytest.fixture()
def create_product(client):
    def _create(name="Avocado box", price="12.50", stock=60, **extra):
        response = client.post("/products", json={"name": name, "price": price, "stock": stock, **extra})
        assert response.status_code == 201
        return response.json()["product_id"]

    return _create
