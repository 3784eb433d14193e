"""Payment refund and cancellation: commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.payment.events import RefundCompleted
from marketplace.payment.payment import Payment

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Payment")
class RefundPayment:
    payment_id = Identifier(required=True)


@marketplace.command(part_of="Payment")
class RefundPaymentByOrder:
    """Refund or cancel whatever payment an order has.

    Completed payments are refunded. Pending and processing payments are
    cancelled instead. Anything else is left alone. Returns the payment id,
    or None when the order has no payment yet.
    """

    order_id = Identifier(required=True)


@marketplace.command(part_of="Payment")
class CancelPayment:
    payment_id = Identifier(required=True)


def _refund(payment: Payment) -> None:
    payment.refund()
    payment.raise_(
        RefundCompleted(
            payment_id=payment.id,
            order_id=payment.order_id,
            payer_id=payment.payer_id,
            amount=payment.amount,
        )
    )


@marketplace.command_handler(part_of=Payment)
class RefundHandler:
    @handle(RefundPayment)
    def refund_payment(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get(command.payment_id)
        _refund(payment)
        repo.add(payment)

    @handle(RefundPaymentByOrder)
    def refund_payment_by_order(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.find_for_order(command.order_id)
        if payment is None:
            logger.info("No payment to refund for order", order_id=str(command.order_id))
            return None

        if payment.can_refund():
            _refund(payment)
            repo.add(payment)
            logger.info("Payment refunded", payment_id=str(payment.id), order_id=str(command.order_id))
        elif payment.can_cancel():
            payment.cancel()
            repo.add(payment)
            logger.info("Payment cancelled", payment_id=str(payment.id), order_id=str(command.order_id))
        else:
            logger.info(
                "Payment left unchanged",
                payment_id=str(payment.id),
                order_id=str(command.order_id),
                status=payment.status,
            )

        return str(payment.id)

    @handle(CancelPayment)
    def cancel_payment(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get(command.payment_id)
        payment.cancel()
        repo.add(payment)
