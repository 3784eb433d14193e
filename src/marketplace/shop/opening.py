"""Shop creation: command and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.shop.events import ShopCreated
from marketplace.shop.shop import Shop, ShopCategory


@marketplace.command(part_of="Shop")
class CreateShop:
    name = String(required=True, max_length=100)
    category = String(required=True, max_length=20, choices=ShopCategory)
    description = Text()
    address = String(max_length=255)
    phone_number = String(max_length=20)
    owner_id = Identifier()


@marketplace.command_handler(part_of=Shop)
class CreateShopHandler:
    @handle(CreateShop)
    def create_shop(self, command):
        shop = Shop.open(
            name=command.name,
            category=command.category,
            owner_id=command.owner_id,
            description=command.description,
            address=command.address,
            phone_number=command.phone_number,
        )
        shop.raise_(
            ShopCreated(
                shop_id=shop.id,
                name=shop.name,
                category=shop.category,
                owner_id=shop.owner_id,
                created_at=shop.created_at,
            )
        )
        current_domain.repository_for(Shop).add(shop)
        return str(shop.id)
