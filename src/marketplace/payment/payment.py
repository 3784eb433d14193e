"""Payment aggregate and its state machine.

State Machine:
    PENDING → PROCESSING → COMPLETED | FAILED
    COMPLETED → REFUNDED
    PENDING | PROCESSING → CANCELLED

A transaction id is assigned when processing starts; a failure reason only
when the payment fails.
"""

from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import DateTime, Decimal, Identifier, String

from marketplace.domain import marketplace

TRANSACTION_ID_PREFIX = "TXN-"


class PaymentStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"
    CANCELLED = "CANCELLED"


class PaymentMethod(Enum):
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    BANK_TRANSFER = "BANK_TRANSFER"


_PROCESSABLE_STATES = {PaymentStatus.PENDING}
_REFUNDABLE_STATES = {PaymentStatus.COMPLETED}
_CANCELLABLE_STATES = {PaymentStatus.PENDING, PaymentStatus.PROCESSING}


def new_transaction_id() -> str:
    return TRANSACTION_ID_PREFIX + uuid4().hex[:8].upper()


@marketplace.aggregate
class Payment:
    order_id = Identifier(required=True)
    payer_id = Identifier(required=True)
    amount = Decimal(required=True, min_value=0)
    payment_method = String(required=True, max_length=20, choices=PaymentMethod)
    status = String(max_length=20, choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    transaction_id = String(max_length=50)
    failure_reason = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()
    completed_at = DateTime()
    refunded_at = DateTime()

    @classmethod
    def create(cls, order_id, payer_id, amount, payment_method):
        """Build a new payment in PENDING."""
        now = datetime.now(UTC)
        return cls(
            order_id=order_id,
            payer_id=payer_id,
            amount=amount,
            payment_method=payment_method,
            status=PaymentStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Transition predicates
    # -------------------------------------------------------------------
    def can_process(self) -> bool:
        return PaymentStatus(self.status) in _PROCESSABLE_STATES

    def can_refund(self) -> bool:
        return PaymentStatus(self.status) in _REFUNDABLE_STATES

    def can_cancel(self) -> bool:
        return PaymentStatus(self.status) in _CANCELLABLE_STATES

    # -------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------
    def process(self) -> None:
        if not self.can_process():
            raise ValidationError({"status": ["Payment cannot be processed in its current state"]})
        self.transaction_id = new_transaction_id()
        self.status = PaymentStatus.PROCESSING.value
        self.updated_at = datetime.now(UTC)

    def complete(self) -> None:
        if self.status != PaymentStatus.PROCESSING.value:
            raise ValidationError({"status": ["Only a processing payment may be completed"]})
        now = datetime.now(UTC)
        self.status = PaymentStatus.COMPLETED.value
        self.completed_at = now
        self.updated_at = now

    def fail(self, reason: str) -> None:
        if self.status != PaymentStatus.PROCESSING.value:
            raise ValidationError({"status": ["Only a processing payment may be failed"]})
        self.status = PaymentStatus.FAILED.value
        self.failure_reason = reason
        self.updated_at = datetime.now(UTC)

    def refund(self) -> None:
        if not self.can_refund():
            raise ValidationError({"status": ["Payment cannot be refunded in its current state"]})
        now = datetime.now(UTC)
        self.status = PaymentStatus.REFUNDED.value
        self.refunded_at = now
        self.updated_at = now

    def cancel(self) -> None:
        if not self.can_cancel():
            raise ValidationError({"status": ["Payment cannot be cancelled in its current state"]})
        self.status = PaymentStatus.CANCELLED.value
        self.updated_at = datetime.now(UTC)
