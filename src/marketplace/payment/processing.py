"""Payment processing: command and handler.

Moves a pending payment into processing, asks the gateway to authorize it,
then completes or fails it depending on the answer.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.gateway import get_gateway
from marketplace.gateway.port import DEFAULT_DECLINE_REASON
from marketplace.payment.events import PaymentCompleted, PaymentFailed
from marketplace.payment.payment import Payment

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Payment")
class ProcessPayment:
    payment_id = Identifier(required=True)


@marketplace.command_handler(part_of=Payment)
class ProcessPaymentHandler:
    @handle(ProcessPayment)
    def process_payment(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get(command.payment_id)
        payment.process()

        result = get_gateway().authorize(
            payment_id=str(payment.id),
            amount=payment.amount,
            payment_method=payment.payment_method,
            transaction_id=payment.transaction_id,
        )

        if result.approved:
            payment.complete()
            payment.raise_(
                PaymentCompleted(
                    payment_id=payment.id,
                    order_id=payment.order_id,
                    payer_id=payment.payer_id,
                    amount=payment.amount,
                    transaction_id=payment.transaction_id,
                )
            )
            logger.info(
                "Payment completed",
                payment_id=str(payment.id),
                transaction_id=payment.transaction_id,
            )
        else:
            reason = result.failure_reason or DEFAULT_DECLINE_REASON
            payment.fail(reason)
            payment.raise_(
                PaymentFailed(
                    payment_id=payment.id,
                    order_id=payment.order_id,
                    payer_id=payment.payer_id,
                    amount=payment.amount,
                    reason=reason,
                )
            )
            logger.warning("Payment failed", payment_id=str(payment.id), reason=reason)

        repo.add(payment)
        return payment.status
