"""Tests for the User and Shop aggregates."""

import pytest
from marketplace.shop.shop import Shop, ShopCategory
from marketplace.user.user import User, UserRole
from protean.exceptions import ValidationError


class TestUser:
    def test_register_defaults_to_user_role(self):
        user = User.register(name="Minji Kim", email="minji@example.com")
        assert user.role == UserRole.USER.value
        assert user.created_at is not None

    def test_register_with_role(self):
        user = User.register(name="Seller", email="seller@example.com", role=UserRole.SELLER.value)
        assert user.role == "SELLER"

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValidationError):
            User.register(name="X", email="x@example.com", role="OWNER")

    def test_update_details_keeps_omitted_fields(self):
        user = User.register(name="Minji Kim", email="minji@example.com", phone_number="010-1111-2222")
        user.update_details(name="Minji Park")
        assert user.name == "Minji Park"
        assert user.phone_number == "010-1111-2222"


class TestShop:
    def test_open_is_active(self):
        shop = Shop.open(name="Corner Cafe", category=ShopCategory.CAFE.value)
        assert shop.is_active is True

    def test_unknown_category_is_rejected(self):
        with pytest.raises(ValidationError):
            Shop.open(name="Corner Cafe", category="BAKERY")

    def test_deactivate_and_activate(self):
        shop = Shop.open(name="Corner Cafe", category=ShopCategory.CAFE.value)
        shop.deactivate()
        assert shop.is_active is False
        shop.activate()
        assert shop.is_active is True

    def test_change_category(self):
        shop = Shop.open(name="Corner Cafe", category=ShopCategory.CAFE.value)
        shop.change_category(ShopCategory.RESTAURANT.value)
        assert shop.category == "RESTAURANT"

    def test_update_info_keeps_omitted_fields(self):
        shop = Shop.open(name="Corner Cafe", category="CAFE", address="12 Main Street")
        shop.update_info(description="Coffee and pastries")
        assert shop.description == "Coffee and pastries"
        assert shop.address == "12 Main Street"
