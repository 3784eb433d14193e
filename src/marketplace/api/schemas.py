"""Pydantic request/response schemas for the Marketplace API.

These are the external contracts. They are kept apart from the Protean
commands they are translated into.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Jane Doe",
                    "email": "jane.doe@example.com",
                    "phone_number": "010-1234-5678",
                    "role": "USER",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    phone_number: str | None = Field(None, max_length=20)
    role: str = Field("USER", max_length=20)


class UpdateUserRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    phone_number: str | None = Field(None, max_length=20)


class UserResponse(BaseModel):
    user_id: str
    name: str
    email: str
    phone_number: str | None = None
    role: str
    created_at: str | None = None
    updated_at: str | None = None


# ---------------------------------------------------------------------------
# Shops
# ---------------------------------------------------------------------------
class CreateShopRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Corner Cafe",
                    "category": "CAFE",
                    "description": "Coffee and pastries",
                    "address": "12 Main Street",
                    "phone_number": "02-555-0101",
                    "owner_id": "c0ffee00-0000-4000-8000-000000000001",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    category: str = Field(..., max_length=20)
    description: str | None = None
    address: str | None = Field(None, max_length=255)
    phone_number: str | None = Field(None, max_length=20)
    owner_id: str | None = None


class UpdateShopRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    description: str | None = None
    address: str | None = Field(None, max_length=255)
    phone_number: str | None = Field(None, max_length=20)


class ChangeShopCategoryRequest(BaseModel):
    category: str = Field(..., max_length=20)


class ShopResponse(BaseModel):
    shop_id: str
    name: str
    category: str
    description: str | None = None
    address: str | None = None
    phone_number: str | None = None
    owner_id: str | None = None
    is_active: bool
    created_at: str | None = None
    updated_at: str | None = None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "buyer_id": "c0ffee00-0000-4000-8000-000000000001",
                    "shop_id": "c0ffee00-0000-4000-8000-000000000002",
                    "product_name": "Americano",
                    "quantity": 2,
                    "total_amount": 50000,
                    "delivery_address": "12 Main Street",
                }
            ]
        }
    }

    buyer_id: str
    shop_id: str
    product_name: str = Field(..., max_length=255)
    quantity: int = Field(..., gt=0)
    total_amount: Decimal = Field(..., ge=0)
    delivery_address: str = Field(..., max_length=500)


class OrderResponse(BaseModel):
    order_id: str
    buyer_id: str
    shop_id: str
    product_name: str
    quantity: int
    total_amount: float
    delivery_address: str
    status: str
    created_at: str | None = None
    updated_at: str | None = None


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------
class PaymentResponse(BaseModel):
    payment_id: str
    order_id: str
    payer_id: str
    amount: float
    payment_method: str
    status: str
    transaction_id: str | None = None
    failure_reason: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    completed_at: str | None = None
    refunded_at: str | None = None


class ConfigureGatewayRequest(BaseModel):
    should_succeed: bool = True
    failure_reason: str = "Payment processing failed: card issuer declined"


class GatewayConfigResponse(BaseModel):
    gateway: str
    should_succeed: bool
    failure_reason: str
