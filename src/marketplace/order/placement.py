"""Order placement: command and handler.

The buyer and the shop must both exist before an order is accepted.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Decimal, Identifier, Integer, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.order.events import OrderCreated
from marketplace.order.order import Order
from marketplace.shop.shop import Shop
from marketplace.user.user import User

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Order")
class CreateOrder:
    buyer_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    total_amount = Decimal(required=True, min_value=0)
    delivery_address = String(required=True, max_length=500)


@marketplace.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        if not current_domain.repository_for(User).exists(command.buyer_id):
            raise ObjectNotFoundError(f"Buyer with id {command.buyer_id} not found")
        if not current_domain.repository_for(Shop).exists(command.shop_id):
            raise ObjectNotFoundError(f"Shop with id {command.shop_id} not found")

        order = Order.place(
            buyer_id=command.buyer_id,
            shop_id=command.shop_id,
            product_name=command.product_name,
            quantity=command.quantity,
            total_amount=command.total_amount,
            delivery_address=command.delivery_address,
        )
        order.raise_(
            OrderCreated(
                order_id=order.id,
                buyer_id=order.buyer_id,
                shop_id=order.shop_id,
                product_name=order.product_name,
                total_amount=order.total_amount,
            )
        )
        current_domain.repository_for(Order).add(order)

        logger.info("Order placed", order_id=str(order.id), buyer_id=str(order.buyer_id))
        return str(order.id)
