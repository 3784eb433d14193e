"""Configurable fake payment gateway for development and testing.

Approves every charge unless told otherwise through ``configure()``.
"""

from decimal import Decimal

from marketplace.gateway.port import DEFAULT_DECLINE_REASON, AuthorizationResult, PaymentGateway


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = DEFAULT_DECLINE_REASON
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = DEFAULT_DECLINE_REASON) -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def authorize(
        self,
        payment_id: str,
        amount: Decimal,
        payment_method: str,
        transaction_id: str,
    ) -> AuthorizationResult:
        self.calls.append(
            {
                "method": "authorize",
                "payment_id": payment_id,
                "amount": amount,
                "payment_method": payment_method,
                "transaction_id": transaction_id,
            }
        )

        if self.should_succeed:
            return AuthorizationResult(approved=True)
        return AuthorizationResult(approved=False, failure_reason=self.failure_reason)
