"""Payment gateway port.

Processing a payment asks the gateway for one yes/no decision. Adapters
decide how that decision is reached.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

DEFAULT_DECLINE_REASON = "Payment processing failed: card issuer declined"


@dataclass(frozen=True)
class AuthorizationResult:
    """Outcome of an authorization request."""

    approved: bool
    failure_reason: str | None = None


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def authorize(
        self,
        payment_id: str,
        amount: Decimal,
        payment_method: str,
        transaction_id: str,
    ) -> AuthorizationResult:
        """Approve or decline the charge for a payment in processing."""
        ...
