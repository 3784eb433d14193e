"""Repository for the Order aggregate."""

from marketplace.domain import marketplace
from marketplace.order.order import Order


@marketplace.repository(part_of=Order)
class OrderRepository:
    def all_orders(self) -> list[Order]:
        return self._dao.query.all().items

    def by_buyer(self, buyer_id: str) -> list[Order]:
        return self._dao.query.filter(buyer_id=buyer_id).all().items

    def by_shop(self, shop_id: str) -> list[Order]:
        return self._dao.query.filter(shop_id=shop_id).all().items

    def by_status(self, status: str) -> list[Order]:
        return self._dao.query.filter(status=status).all().items
