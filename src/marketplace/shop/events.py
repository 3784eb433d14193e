"""Domain events for the Shop aggregate."""

from protean.fields import DateTime, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Shop")
class ShopCreated:
    """A shop was opened on the marketplace."""

    __version__ = 1

    shop_id = Identifier(required=True)
    name = String(required=True)
    category = String(required=True)
    owner_id = Identifier()
    created_at = DateTime(required=True)
