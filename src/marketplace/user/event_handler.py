"""Reactions to user events. Logging only."""

import structlog
from protean.utils.mixins import handle

from marketplace.domain import marketplace
from marketplace.user.events import UserCreated
from marketplace.user.user import User

logger = structlog.get_logger(__name__)


@marketplace.event_handler(part_of=User)
class UserEventHandler:
    @handle(UserCreated)
    def on_user_created(self, event: UserCreated) -> None:
        logger.info("User created", user_id=str(event.user_id), role=event.role)
