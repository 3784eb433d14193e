"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.user.events import UserCreated
from marketplace.user.user import User, UserRole


@marketplace.command(part_of="User")
class RegisterUser:
    """Create a user account. Emails are unique across users."""

    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone_number = String(max_length=20)
    role = String(max_length=20, choices=UserRole, default=UserRole.USER.value)


@marketplace.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": [f"A user with email {command.email} already exists"]})

        user = User.register(
            name=command.name,
            email=command.email,
            phone_number=command.phone_number,
            role=command.role,
        )
        user.raise_(
            UserCreated(
                user_id=user.id,
                name=user.name,
                email=user.email,
                role=user.role,
                created_at=user.created_at,
            )
        )
        repo.add(user)
        return str(user.id)
