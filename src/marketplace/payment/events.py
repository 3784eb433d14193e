"""Domain events for the Payment aggregate."""

from protean.fields import Decimal, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Payment")
class PaymentCompleted:
    """The gateway approved the charge."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    payer_id = Identifier(required=True)
    amount = Decimal(required=True)
    transaction_id = String(required=True)


@marketplace.event(part_of="Payment")
class PaymentFailed:
    """The gateway declined the charge."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    payer_id = Identifier(required=True)
    amount = Decimal(required=True)
    reason = String(required=True)


@marketplace.event(part_of="Payment")
class RefundCompleted:
    """A completed payment was refunded in full."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    payer_id = Identifier(required=True)
    amount = Decimal(required=True)
