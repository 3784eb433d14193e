"""FastAPI routes for the Marketplace domain: users, shops, orders, payments.

Thin adapters: writes become commands, reads go straight to repositories.
"""

import os

from fastapi import APIRouter, HTTPException, Response
from protean.utils.globals import current_domain

from marketplace.api.schemas import (
    ChangeShopCategoryRequest,
    ConfigureGatewayRequest,
    CreateOrderRequest,
    CreateShopRequest,
    GatewayConfigResponse,
    OrderResponse,
    PaymentResponse,
    RegisterUserRequest,
    ShopResponse,
    UpdateShopRequest,
    UpdateUserRequest,
    UserResponse,
)
from marketplace.gateway import get_gateway
from marketplace.gateway.fake_adapter import FakeGateway
from marketplace.order.lifecycle import CancelOrder, ConfirmOrder, DeleteOrder, DeliverOrder, ShipOrder
from marketplace.order.order import Order, OrderStatus
from marketplace.order.placement import CreateOrder
from marketplace.payment.payment import Payment, PaymentStatus
from marketplace.payment.processing import ProcessPayment
from marketplace.payment.refund import CancelPayment, RefundPayment
from marketplace.shop.management import (
    ActivateShop,
    ChangeShopCategory,
    DeactivateShop,
    DeleteShop,
    UpdateShopInfo,
)
from marketplace.shop.opening import CreateShop
from marketplace.shop.shop import Shop, ShopCategory
from marketplace.user.management import DeleteUser, UpdateUser
from marketplace.user.registration import RegisterUser
from marketplace.user.user import User


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        user_id=str(user.id),
        name=user.name,
        email=user.email,
        phone_number=user.phone_number,
        role=user.role,
        created_at=_iso(user.created_at),
        updated_at=_iso(user.updated_at),
    )


def _shop_response(shop: Shop) -> ShopResponse:
    return ShopResponse(
        shop_id=str(shop.id),
        name=shop.name,
        category=shop.category,
        description=shop.description,
        address=shop.address,
        phone_number=shop.phone_number,
        owner_id=str(shop.owner_id) if shop.owner_id else None,
        is_active=shop.is_active,
        created_at=_iso(shop.created_at),
        updated_at=_iso(shop.updated_at),
    )


def _order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        order_id=str(order.id),
        buyer_id=str(order.buyer_id),
        shop_id=str(order.shop_id),
        product_name=order.product_name,
        quantity=order.quantity,
        total_amount=float(order.total_amount),
        delivery_address=order.delivery_address,
        status=order.status,
        created_at=_iso(order.created_at),
        updated_at=_iso(order.updated_at),
    )


def _payment_response(payment: Payment) -> PaymentResponse:
    return PaymentResponse(
        payment_id=str(payment.id),
        order_id=str(payment.order_id),
        payer_id=str(payment.payer_id),
        amount=float(payment.amount),
        payment_method=payment.payment_method,
        status=payment.status,
        transaction_id=payment.transaction_id,
        failure_reason=payment.failure_reason,
        created_at=_iso(payment.created_at),
        updated_at=_iso(payment.updated_at),
        completed_at=_iso(payment.completed_at),
        refunded_at=_iso(payment.refunded_at),
    )


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.post("", status_code=201, response_model=UserResponse)
async def register_user(body: RegisterUserRequest) -> UserResponse:
    user_id = current_domain.process(
        RegisterUser(
            name=body.name,
            email=body.email,
            phone_number=body.phone_number,
            role=body.role,
        ),
        asynchronous=False,
    )
    return _user_response(current_domain.repository_for(User).get(user_id))


@user_router.get("", response_model=list[UserResponse])
async def list_users() -> list[UserResponse]:
    return [_user_response(user) for user in current_domain.repository_for(User).all_users()]


@user_router.get("/email/{email}", response_model=UserResponse)
async def get_user_by_email(email: str) -> UserResponse:
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User with email {email} not found")
    return _user_response(user)


@user_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    return _user_response(current_domain.repository_for(User).get(user_id))


@user_router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, body: UpdateUserRequest) -> UserResponse:
    current_domain.process(
        UpdateUser(user_id=user_id, name=body.name, phone_number=body.phone_number),
        asynchronous=False,
    )
    return _user_response(current_domain.repository_for(User).get(user_id))


@user_router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: str) -> Response:
    current_domain.process(DeleteUser(user_id=user_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Shop Router
# ---------------------------------------------------------------------------
shop_router = APIRouter(prefix="/shops", tags=["shops"])


@shop_router.post("", status_code=201, response_model=ShopResponse)
async def create_shop(body: CreateShopRequest) -> ShopResponse:
    shop_id = current_domain.process(
        CreateShop(
            name=body.name,
            category=body.category,
            description=body.description,
            address=body.address,
            phone_number=body.phone_number,
            owner_id=body.owner_id,
        ),
        asynchronous=False,
    )
    return _shop_response(current_domain.repository_for(Shop).get(shop_id))


@shop_router.get("", response_model=list[ShopResponse])
async def list_shops() -> list[ShopResponse]:
    return [_shop_response(shop) for shop in current_domain.repository_for(Shop).all_shops()]


@shop_router.get("/active", response_model=list[ShopResponse])
async def list_active_shops() -> list[ShopResponse]:
    return [_shop_response(shop) for shop in current_domain.repository_for(Shop).active_shops()]


@shop_router.get("/category/{category}", response_model=list[ShopResponse])
async def list_shops_by_category(category: ShopCategory) -> list[ShopResponse]:
    shops = current_domain.repository_for(Shop).by_category(category.value)
    return [_shop_response(shop) for shop in shops]


@shop_router.get("/owner/{owner_id}", response_model=list[ShopResponse])
async def list_shops_by_owner(owner_id: str) -> list[ShopResponse]:
    return [_shop_response(shop) for shop in current_domain.repository_for(Shop).by_owner(owner_id)]


@shop_router.get("/{shop_id}", response_model=ShopResponse)
async def get_shop(shop_id: str) -> ShopResponse:
    return _shop_response(current_domain.repository_for(Shop).get(shop_id))


@shop_router.put("/{shop_id}", response_model=ShopResponse)
async def update_shop(shop_id: str, body: UpdateShopRequest) -> ShopResponse:
    current_domain.process(
        UpdateShopInfo(
            shop_id=shop_id,
            name=body.name,
            description=body.description,
            address=body.address,
            phone_number=body.phone_number,
        ),
        asynchronous=False,
    )
    return _shop_response(current_domain.repository_for(Shop).get(shop_id))


@shop_router.patch("/{shop_id}/category", response_model=ShopResponse)
async def change_shop_category(shop_id: str, body: ChangeShopCategoryRequest) -> ShopResponse:
    current_domain.process(ChangeShopCategory(shop_id=shop_id, category=body.category), asynchronous=False)
    return _shop_response(current_domain.repository_for(Shop).get(shop_id))


@shop_router.patch("/{shop_id}/activate", response_model=ShopResponse)
async def activate_shop(shop_id: str) -> ShopResponse:
    current_domain.process(ActivateShop(shop_id=shop_id), asynchronous=False)
    return _shop_response(current_domain.repository_for(Shop).get(shop_id))


@shop_router.patch("/{shop_id}/deactivate", response_model=ShopResponse)
async def deactivate_shop(shop_id: str) -> ShopResponse:
    current_domain.process(DeactivateShop(shop_id=shop_id), asynchronous=False)
    return _shop_response(current_domain.repository_for(Shop).get(shop_id))


@shop_router.delete("/{shop_id}", status_code=204)
async def delete_shop(shop_id: str) -> Response:
    current_domain.process(DeleteShop(shop_id=shop_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest) -> OrderResponse:
    """Place an order. A pending payment is opened for it in the same request."""
    order_id = current_domain.process(
        CreateOrder(
            buyer_id=body.buyer_id,
            shop_id=body.shop_id,
            product_name=body.product_name,
            quantity=body.quantity,
            total_amount=body.total_amount,
            delivery_address=body.delivery_address,
        ),
        asynchronous=False,
    )
    return _order_response(current_domain.repository_for(Order).get(order_id))


@order_router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    return [_order_response(order) for order in current_domain.repository_for(Order).all_orders()]


@order_router.get("/user/{buyer_id}", response_model=list[OrderResponse])
async def list_orders_by_buyer(buyer_id: str) -> list[OrderResponse]:
    return [_order_response(order) for order in current_domain.repository_for(Order).by_buyer(buyer_id)]


@order_router.get("/shop/{shop_id}", response_model=list[OrderResponse])
async def list_orders_by_shop(shop_id: str) -> list[OrderResponse]:
    return [_order_response(order) for order in current_domain.repository_for(Order).by_shop(shop_id)]


@order_router.get("/status/{status}", response_model=list[OrderResponse])
async def list_orders_by_status(status: OrderStatus) -> list[OrderResponse]:
    return [_order_response(order) for order in current_domain.repository_for(Order).by_status(status.value)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return _order_response(current_domain.repository_for(Order).get(order_id))


@order_router.patch("/{order_id}/confirm", response_model=OrderResponse)
async def confirm_order(order_id: str) -> OrderResponse:
    current_domain.process(ConfirmOrder(order_id=order_id), asynchronous=False)
    return _order_response(current_domain.repository_for(Order).get(order_id))


@order_router.patch("/{order_id}/ship", response_model=OrderResponse)
async def ship_order(order_id: str) -> OrderResponse:
    current_domain.process(ShipOrder(order_id=order_id), asynchronous=False)
    return _order_response(current_domain.repository_for(Order).get(order_id))


@order_router.patch("/{order_id}/deliver", response_model=OrderResponse)
async def deliver_order(order_id: str) -> OrderResponse:
    current_domain.process(DeliverOrder(order_id=order_id), asynchronous=False)
    return _order_response(current_domain.repository_for(Order).get(order_id))


@order_router.patch("/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(order_id: str) -> OrderResponse:
    """Cancel an order. Its payment is refunded or cancelled in the same request."""
    current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)
    return _order_response(current_domain.repository_for(Order).get(order_id))


@order_router.delete("/{order_id}", status_code=204)
async def delete_order(order_id: str) -> Response:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Payment Router
# ---------------------------------------------------------------------------
payment_router = APIRouter(prefix="/payments", tags=["payments"])


@payment_router.get("", response_model=list[PaymentResponse])
async def list_payments() -> list[PaymentResponse]:
    return [_payment_response(payment) for payment in current_domain.repository_for(Payment).all_payments()]


@payment_router.get("/order/{order_id}", response_model=PaymentResponse)
async def get_payment_for_order(order_id: str) -> PaymentResponse:
    return _payment_response(current_domain.repository_for(Payment).for_order(order_id))


@payment_router.get("/user/{payer_id}", response_model=list[PaymentResponse])
async def list_payments_by_payer(payer_id: str) -> list[PaymentResponse]:
    return [_payment_response(payment) for payment in current_domain.repository_for(Payment).by_payer(payer_id)]


@payment_router.get("/status/{status}", response_model=list[PaymentResponse])
async def list_payments_by_status(status: PaymentStatus) -> list[PaymentResponse]:
    payments = current_domain.repository_for(Payment).by_status(status.value)
    return [_payment_response(payment) for payment in payments]


@payment_router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(payment_id: str) -> PaymentResponse:
    return _payment_response(current_domain.repository_for(Payment).get(payment_id))


@payment_router.post("/{payment_id}/process", response_model=PaymentResponse)
async def process_payment(payment_id: str) -> PaymentResponse:
    current_domain.process(ProcessPayment(payment_id=payment_id), asynchronous=False)
    return _payment_response(current_domain.repository_for(Payment).get(payment_id))


@payment_router.post("/{payment_id}/refund", response_model=PaymentResponse)
async def refund_payment(payment_id: str) -> PaymentResponse:
    current_domain.process(RefundPayment(payment_id=payment_id), asynchronous=False)
    return _payment_response(current_domain.repository_for(Payment).get(payment_id))


@payment_router.post("/{payment_id}/cancel", response_model=PaymentResponse)
async def cancel_payment(payment_id: str) -> PaymentResponse:
    current_domain.process(CancelPayment(payment_id=payment_id), asynchronous=False)
    return _payment_response(current_domain.repository_for(Payment).get(payment_id))


@payment_router.post("/gateway/configure", response_model=GatewayConfigResponse)
async def configure_gateway(body: ConfigureGatewayRequest) -> GatewayConfigResponse:
    """Configure the FakeGateway behavior (non-production only)."""
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail="Gateway configuration not available in production")

    gateway = get_gateway()
    if not isinstance(gateway, FakeGateway):
        raise HTTPException(status_code=400, detail="Gateway configuration only available for FakeGateway")

    gateway.configure(
        should_succeed=body.should_succeed,
        failure_reason=body.failure_reason,
    )
    return GatewayConfigResponse(
        gateway=type(gateway).__name__,
        should_succeed=gateway.should_succeed,
        failure_reason=gateway.failure_reason,
    )
