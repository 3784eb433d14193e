"""Shop maintenance: info, category, activation and deletion."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.shop.shop import Shop, ShopCategory


@marketplace.command(part_of="Shop")
class UpdateShopInfo:
    """Change descriptive fields of a shop. Omitted fields are kept."""

    shop_id = Identifier(required=True)
    name = String(max_length=100)
    description = Text()
    address = String(max_length=255)
    phone_number = String(max_length=20)


@marketplace.command(part_of="Shop")
class ChangeShopCategory:
    shop_id = Identifier(required=True)
    category = String(required=True, max_length=20, choices=ShopCategory)


@marketplace.command(part_of="Shop")
class ActivateShop:
    shop_id = Identifier(required=True)


@marketplace.command(part_of="Shop")
class DeactivateShop:
    shop_id = Identifier(required=True)


@marketplace.command(part_of="Shop")
class DeleteShop:
    shop_id = Identifier(required=True)


@marketplace.command_handler(part_of=Shop)
class ShopManagementHandler:
    @handle(UpdateShopInfo)
    def update_shop_info(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.get(command.shop_id)
        shop.update_info(
            name=command.name,
            description=command.description,
            address=command.address,
            phone_number=command.phone_number,
        )
        repo.add(shop)

    @handle(ChangeShopCategory)
    def change_shop_category(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.get(command.shop_id)
        shop.change_category(command.category)
        repo.add(shop)

    @handle(ActivateShop)
    def activate_shop(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.get(command.shop_id)
        shop.activate()
        repo.add(shop)

    @handle(DeactivateShop)
    def deactivate_shop(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.get(command.shop_id)
        shop.deactivate()
        repo.add(shop)

    @handle(DeleteShop)
    def delete_shop(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.get(command.shop_id)
        repo._dao.delete(shop)
