"""Reactions to shop events. Logging only."""

import structlog
from protean.utils.mixins import handle

from marketplace.domain import marketplace
from marketplace.shop.events import ShopCreated
from marketplace.shop.shop import Shop

logger = structlog.get_logger(__name__)


@marketplace.event_handler(part_of=Shop)
class ShopEventHandler:
    @handle(ShopCreated)
    def on_shop_created(self, event: ShopCreated) -> None:
        logger.info(
            "Shop created",
            shop_id=str(event.shop_id),
            category=event.category,
            owner_id=str(event.owner_id) if event.owner_id else None,
        )
