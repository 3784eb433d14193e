"""Order lifecycle: confirm, ship, deliver, cancel and delete."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.order.events import OrderCancelled
from marketplace.order.order import Order


@marketplace.command(part_of="Order")
class ConfirmOrder:
    order_id = Identifier(required=True)


@marketplace.command(part_of="Order")
class ShipOrder:
    order_id = Identifier(required=True)


@marketplace.command(part_of="Order")
class DeliverOrder:
    order_id = Identifier(required=True)


@marketplace.command(part_of="Order")
class CancelOrder:
    """Cancel a pending or confirmed order. Its payment follows via OrderCancelled."""

    order_id = Identifier(required=True)


@marketplace.command(part_of="Order")
class DeleteOrder:
    """Remove an order. The payment, if any, is left untouched."""

    order_id = Identifier(required=True)


@marketplace.command_handler(part_of=Order)
class OrderLifecycleHandler:
    @handle(ConfirmOrder)
    def confirm_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.confirm()
        repo.add(order)

    @handle(ShipOrder)
    def ship_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.ship()
        repo.add(order)

    @handle(DeliverOrder)
    def deliver_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.deliver()
        repo.add(order)

    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.cancel()
        order.raise_(
            OrderCancelled(
                order_id=order.id,
                buyer_id=order.buyer_id,
                shop_id=order.shop_id,
            )
        )
        repo.add(order)

    @handle(DeleteOrder)
    def delete_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        repo._dao.delete(order)
