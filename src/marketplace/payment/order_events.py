"""Payments react to the order lifecycle.

OrderCreated opens a credit card payment for the order. OrderCancelled
refunds or cancels it. Both may be delivered more than once.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from marketplace.domain import marketplace
from marketplace.order.events import OrderCancelled, OrderCreated
from marketplace.payment.creation import CreatePayment
from marketplace.payment.payment import Payment, PaymentMethod
from marketplace.payment.refund import RefundPaymentByOrder

logger = structlog.get_logger(__name__)


@marketplace.event_handler(part_of=Payment, stream_category="marketplace::order")
class OrderPaymentEventHandler:
    """Keeps each order's payment in step with the order."""

    @handle(OrderCreated)
    def on_order_created(self, event: OrderCreated) -> None:
        logger.info("Opening payment for new order", order_id=str(event.order_id))

        existing = current_domain.repository_for(Payment).find_for_order(str(event.order_id))
        if existing is not None:
            logger.info(
                "Payment already exists for order",
                order_id=str(event.order_id),
                payment_id=str(existing.id),
            )
            return

        payment_id = current_domain.process(
            CreatePayment(
                order_id=str(event.order_id),
                payer_id=str(event.buyer_id),
                amount=event.total_amount,
                payment_method=PaymentMethod.CREDIT_CARD.value,
            ),
            asynchronous=False,
        )
        logger.info("Payment opened for order", order_id=str(event.order_id), payment_id=payment_id)

    @handle(OrderCancelled)
    def on_order_cancelled(self, event: OrderCancelled) -> None:
        logger.info("Settling payment for cancelled order", order_id=str(event.order_id))

        payment_id = current_domain.process(
            RefundPaymentByOrder(order_id=str(event.order_id)),
            asynchronous=False,
        )
        logger.info("Payment settled for cancelled order", order_id=str(event.order_id), payment_id=payment_id)
