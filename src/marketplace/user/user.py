"""User aggregate: buyers, sellers and administrators of the marketplace."""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, String

from marketplace.domain import marketplace


class UserRole(Enum):
    USER = "USER"
    SELLER = "SELLER"
    ADMIN = "ADMIN"


@marketplace.aggregate
class User:
    """A person with an account on the marketplace.

    Orders reference users only by id; the ordering flow asks nothing of a
    user beyond whether it exists.
    """

    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone_number = String(max_length=20)
    role = String(max_length=20, choices=UserRole, default=UserRole.USER.value)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, name, email, phone_number=None, role=UserRole.USER.value):
        now = datetime.now(UTC)
        return cls(
            name=name,
            email=email,
            phone_number=phone_number,
            role=role or UserRole.USER.value,
            created_at=now,
            updated_at=now,
        )

    def update_details(self, name=None, phone_number=None):
        if name is not None:
            self.name = name
        if phone_number is not None:
            self.phone_number = phone_number
        self.updated_at = datetime.now(UTC)
