"""Domain events for the Order aggregate.

Both are consumed by the payment side: a created order opens a payment, a
cancelled order refunds or cancels it.
"""

from protean.fields import Decimal, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Order")
class OrderCreated:
    """A buyer placed an order at a shop."""

    __version__ = 1

    order_id = Identifier(required=True)
    buyer_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    product_name = String(required=True)
    total_amount = Decimal(required=True)


@marketplace.event(part_of="Order")
class OrderCancelled:
    """An order was cancelled before shipping."""

    __version__ = 1

    order_id = Identifier(required=True)
    buyer_id = Identifier(required=True)
    shop_id = Identifier(required=True)
