"""Shop aggregate: a storefront owned by a seller."""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, Identifier, String, Text

from marketplace.domain import marketplace


class ShopCategory(Enum):
    RESTAURANT = "RESTAURANT"
    CAFE = "CAFE"
    RETAIL = "RETAIL"
    FASHION = "FASHION"
    ELECTRONICS = "ELECTRONICS"
    GROCERY = "GROCERY"
    OTHER = "OTHER"


@marketplace.aggregate
class Shop:
    name = String(required=True, max_length=100)
    category = String(required=True, max_length=20, choices=ShopCategory)
    description = Text()
    address = String(max_length=255)
    phone_number = String(max_length=20)
    owner_id = Identifier()
    is_active = Boolean(default=True)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def open(cls, name, category, owner_id=None, description=None, address=None, phone_number=None):
        now = datetime.now(UTC)
        return cls(
            name=name,
            category=category,
            owner_id=owner_id,
            description=description,
            address=address,
            phone_number=phone_number,
            is_active=True,
            created_at=now,
            updated_at=now,
        )

    def update_info(self, name=None, description=None, address=None, phone_number=None):
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if address is not None:
            self.address = address
        if phone_number is not None:
            self.phone_number = phone_number
        self.updated_at = datetime.now(UTC)

    def change_category(self, category):
        self.category = category
        self.updated_at = datetime.now(UTC)

    def activate(self):
        self.is_active = True
        self.updated_at = datetime.now(UTC)

    def deactivate(self):
        self.is_active = False
        self.updated_at = datetime.now(UTC)
