"""User maintenance: update and delete commands."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.user.user import User


@marketplace.command(part_of="User")
class UpdateUser:
    """Change a user's name or phone number. Omitted fields are kept."""

    user_id = Identifier(required=True)
    name = String(max_length=100)
    phone_number = String(max_length=20)


@marketplace.command(part_of="User")
class DeleteUser:
    user_id = Identifier(required=True)


@marketplace.command_handler(part_of=User)
class UserManagementHandler:
    @handle(UpdateUser)
    def update_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.update_details(name=command.name, phone_number=command.phone_number)
        repo.add(user)

    @handle(DeleteUser)
    def delete_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        repo._dao.delete(user)
