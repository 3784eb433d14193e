"""Repository for the User aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.user.user import User


@marketplace.repository(part_of=User)
class UserRepository:
    def all_users(self) -> list[User]:
        return self._dao.query.all().items

    def find_by_email(self, email: str) -> User | None:
        results = self._dao.query.filter(email=email).all().items
        return results[0] if results else None

    def exists(self, user_id: str) -> bool:
        """Whether a user with this id exists. Used by order placement."""
        try:
            self._dao.get(user_id)
        except ObjectNotFoundError:
            return False
        return True
