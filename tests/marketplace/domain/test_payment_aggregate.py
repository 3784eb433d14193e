"""Tests for Payment creation and its state machine."""

import re

import pytest
from marketplace.payment.payment import (
    Payment,
    PaymentMethod,
    PaymentStatus,
    new_transaction_id,
)
from protean.exceptions import ValidationError


def _make_payment(**overrides):
    defaults = {
        "order_id": "ord-001",
        "payer_id": "buyer-001",
        "amount": 50000.0,
        "payment_method": PaymentMethod.CREDIT_CARD.value,
    }
    defaults.update(overrides)
    return Payment.create(**defaults)


def _payment_in(status: PaymentStatus) -> Payment:
    payment = _make_payment()
    if status == PaymentStatus.PENDING:
        return payment
    if status == PaymentStatus.CANCELLED:
        payment.cancel()
        return payment

    payment.process()
    if status == PaymentStatus.COMPLETED:
        payment.complete()
    elif status == PaymentStatus.FAILED:
        payment.fail("Card declined")
    elif status == PaymentStatus.REFUNDED:
        payment.complete()
        payment.refund()
    return payment


class TestPaymentCreation:
    def test_new_payment_is_pending(self):
        payment = _make_payment()
        assert payment.status == PaymentStatus.PENDING.value

    def test_create_sets_fields(self):
        payment = _make_payment()
        assert str(payment.order_id) == "ord-001"
        assert str(payment.payer_id) == "buyer-001"
        assert payment.amount == 50000.0
        assert payment.payment_method == "CREDIT_CARD"

    def test_new_payment_has_no_transaction_or_failure(self):
        payment = _make_payment()
        assert payment.transaction_id is None
        assert payment.failure_reason is None
        assert payment.completed_at is None
        assert payment.refunded_at is None

    def test_unknown_payment_method_is_rejected(self):
        with pytest.raises(ValidationError):
            _make_payment(payment_method="CASH")

    def test_amount_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            _make_payment(amount=-10.0)


class TestTransactionId:
    def test_format(self):
        assert re.fullmatch(r"TXN-[0-9A-F]{8}", new_transaction_id())

    def test_ids_differ(self):
        assert new_transaction_id() != new_transaction_id()


class TestProcess:
    def test_process_assigns_transaction_id(self):
        payment = _make_payment()
        payment.process()
        assert payment.status == PaymentStatus.PROCESSING.value
        assert payment.transaction_id.startswith("TXN-")

    @pytest.mark.parametrize("status", [s for s in PaymentStatus if s != PaymentStatus.PENDING])
    def test_process_requires_pending(self, status):
        payment = _payment_in(status)
        assert not payment.can_process()
        with pytest.raises(ValidationError) as exc:
            payment.process()
        assert "Payment cannot be processed in its current state" in str(exc.value)


class TestCompleteAndFail:
    def test_complete_sets_completed_at(self):
        payment = _payment_in(PaymentStatus.COMPLETED)
        assert payment.status == PaymentStatus.COMPLETED.value
        assert payment.completed_at is not None

    def test_complete_requires_processing(self):
        payment = _make_payment()
        with pytest.raises(ValidationError) as exc:
            payment.complete()
        assert "Only a processing payment may be completed" in str(exc.value)

    def test_fail_stores_reason(self):
        payment = _payment_in(PaymentStatus.FAILED)
        assert payment.status == PaymentStatus.FAILED.value
        assert payment.failure_reason == "Card declined"

    def test_fail_requires_processing(self):
        payment = _payment_in(PaymentStatus.COMPLETED)
        with pytest.raises(ValidationError) as exc:
            payment.fail("Too late")
        assert "Only a processing payment may be failed" in str(exc.value)
        assert payment.failure_reason is None


class TestRefund:
    def test_refund_completed_payment(self):
        payment = _payment_in(PaymentStatus.COMPLETED)
        assert payment.can_refund()
        payment.refund()
        assert payment.status == PaymentStatus.REFUNDED.value
        assert payment.refunded_at is not None

    @pytest.mark.parametrize("status", [s for s in PaymentStatus if s != PaymentStatus.COMPLETED])
    def test_refund_requires_completed(self, status):
        payment = _payment_in(status)
        assert not payment.can_refund()
        with pytest.raises(ValidationError) as exc:
            payment.refund()
        assert "Payment cannot be refunded in its current state" in str(exc.value)


class TestCancel:
    @pytest.mark.parametrize("status", [PaymentStatus.PENDING, PaymentStatus.PROCESSING])
    def test_cancel_from_pending_or_processing(self, status):
        payment = _payment_in(status)
        assert payment.can_cancel()
        payment.cancel()
        assert payment.status == PaymentStatus.CANCELLED.value

    @pytest.mark.parametrize(
        "status",
        [PaymentStatus.COMPLETED, PaymentStatus.FAILED, PaymentStatus.REFUNDED, PaymentStatus.CANCELLED],
    )
    def test_cancel_rejected_otherwise(self, status):
        payment = _payment_in(status)
        with pytest.raises(ValidationError) as exc:
            payment.cancel()
        assert "Payment cannot be cancelled in its current state" in str(exc.value)
