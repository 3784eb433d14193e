"""Repository for the Payment aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.payment.payment import Payment


@marketplace.repository(part_of=Payment)
class PaymentRepository:
    def all_payments(self) -> list[Payment]:
        return self._dao.query.all().items

    def find_for_order(self, order_id: str) -> Payment | None:
        """The latest payment opened for an order, or None."""
        results = self._dao.query.filter(order_id=order_id).order_by("-created_at").all().items
        return results[0] if results else None

    def for_order(self, order_id: str) -> Payment:
        payment = self.find_for_order(order_id)
        if payment is None:
            raise ObjectNotFoundError(f"No payment found for order {order_id}")
        return payment

    def by_payer(self, payer_id: str) -> list[Payment]:
        return self._dao.query.filter(payer_id=payer_id).all().items

    def by_status(self, status: str) -> list[Payment]:
        return self._dao.query.filter(status=status).all().items
