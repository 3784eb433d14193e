import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from marketplace.api import order_router, payment_router, shop_router, user_router
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(user_router)
    app.include_router(shop_router)
    app.include_router(order_router)
    app.include_router(payment_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def api_buyer_id(client):
    response = client.post(
        "/users",
        json={"name": "Minji Kim", "email": "minji@example.com", "phone_number": "010-1111-2222"},
    )
    assert response.status_code == 201
    return response.json()["user_id"]


@pytest.fixture()
def api_shop_id(client):
    response = client.post("/shops", json={"name": "Corner Cafe", "category": "CAFE"})
    assert response.status_code == 201
    return response.json()["shop_id"]


@pytest.fixture()
def place_order(client, api_buyer_id, api_shop_id):
    def _place(**overrides):
        body = {
            "buyer_id": api_buyer_id,
            "shop_id": api_shop_id,
            "product_name": "Americano",
            "quantity": 2,
            "total_amount": 50000,
            "delivery_address": "12 Main Street",
        }
        body.update(overrides)
        response = client.post("/orders", json=body)
        assert response.status_code == 201
        return response.json()

    return _place
