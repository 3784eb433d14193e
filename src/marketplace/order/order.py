"""Order aggregate and its lifecycle state machine.

State Machine:
    PENDING → CONFIRMED → SHIPPED → DELIVERED
    PENDING | CONFIRMED → CANCELLED

DELIVERED and CANCELLED are terminal. Transitions only mutate the order;
the command handlers decide which events to raise.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Decimal, Identifier, Integer, String

from marketplace.domain import marketplace


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


_CANCELLABLE_STATES = {OrderStatus.PENDING, OrderStatus.CONFIRMED}


@marketplace.aggregate
class Order:
    buyer_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    total_amount = Decimal(required=True, min_value=0)
    delivery_address = String(required=True, max_length=500)
    status = String(max_length=20, choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, buyer_id, shop_id, product_name, quantity, total_amount, delivery_address):
        """Build a new order in PENDING."""
        now = datetime.now(UTC)
        return cls(
            buyer_id=buyer_id,
            shop_id=shop_id,
            product_name=product_name,
            quantity=quantity,
            total_amount=total_amount,
            delivery_address=delivery_address,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

    def _move_to(self, status: OrderStatus) -> None:
        self.status = status.value
        self.updated_at = datetime.now(UTC)

    def can_cancel(self) -> bool:
        return OrderStatus(self.status) in _CANCELLABLE_STATES

    def confirm(self) -> None:
        if self.status != OrderStatus.PENDING.value:
            raise ValidationError({"status": ["Only a pending order may be confirmed"]})
        self._move_to(OrderStatus.CONFIRMED)

    def ship(self) -> None:
        if self.status != OrderStatus.CONFIRMED.value:
            raise ValidationError({"status": ["Only a confirmed order may be shipped"]})
        self._move_to(OrderStatus.SHIPPED)

    def deliver(self) -> None:
        if self.status != OrderStatus.SHIPPED.value:
            raise ValidationError({"status": ["Only a shipped order may be completed"]})
        self._move_to(OrderStatus.DELIVERED)

    def cancel(self) -> None:
        if not self.can_cancel():
            raise ValidationError({"status": ["This order cannot be cancelled in its current state"]})
        self._move_to(OrderStatus.CANCELLED)
