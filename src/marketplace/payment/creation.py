"""Payment creation: command and handler.

The order is not looked up here. Callers (normally the OrderCreated
handler) are trusted to pass a real order id. An order may hold more than
one payment; lookups by order resolve to the latest.
"""

from protean import handle
from protean.fields import Decimal, Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.payment.payment import Payment, PaymentMethod


@marketplace.command(part_of="Payment")
class CreatePayment:
    order_id = Identifier(required=True)
    payer_id = Identifier(required=True)
    amount = Decimal(required=True, min_value=0)
    payment_method = String(required=True, max_length=20, choices=PaymentMethod)


@marketplace.command_handler(part_of=Payment)
class CreatePaymentHandler:
    @handle(CreatePayment)
    def create_payment(self, command):
        payment = Payment.create(
            order_id=command.order_id,
            payer_id=command.payer_id,
            amount=command.amount,
            payment_method=command.payment_method,
        )
        current_domain.repository_for(Payment).add(payment)
        return str(payment.id)
