"""Repository for the Shop aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.shop.shop import Shop


@marketplace.repository(part_of=Shop)
class ShopRepository:
    def all_shops(self) -> list[Shop]:
        return self._dao.query.all().items

    def by_category(self, category: str) -> list[Shop]:
        return self._dao.query.filter(category=category).all().items

    def by_owner(self, owner_id: str) -> list[Shop]:
        return self._dao.query.filter(owner_id=owner_id).all().items

    def active_shops(self) -> list[Shop]:
        return self._dao.query.filter(is_active=True).all().items

    def exists(self, shop_id: str) -> bool:
        """Whether a shop with this id exists. Used by order placement."""
        try:
            self._dao.get(shop_id)
        except ObjectNotFoundError:
            return False
        return True
