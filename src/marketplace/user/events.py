"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="User")
class UserCreated:
    """A new user account was created."""

    __version__ = 1

    user_id = Identifier(required=True)
    name = String(required=True)
    email = String(required=True)
    role = String(required=True)
    created_at = DateTime(required=True)
