"""
User resolvers for API v1.

``users`` lists or searches the stored users, ``me`` returns a fixed
demo user and ``createUser`` registers a new user.  A duplicate e‑mail
surfaces as a GraphQL error with code ``CONFLICT``.
"""

from typing import List, Optional

from strawberry.types import Info

from ....core.errors import ValidationError
from ....schemas.user import UserCreate
from ....services.user_service import UserService
from ..context import get_store
from ..types import CreateUserInput, User


def resolve_users(info: Info, query: Optional[str] = None) -> List[User]:
    """Return all users, optionally filtered by a name substring."""
    return [User.from_record(user) for user in UserService.list_users(get_store(info), query)]


def resolve_me() -> User:
    return User.from_record(UserService.me())


def resolve_create_user(info: Info, data: Optional[CreateUserInput] = None) -> User:
    """Create a user.  Fails with ``Email taken.`` on a duplicate e‑mail."""
    if data is None:
        raise ValidationError("Missing user data")
    user, error = UserService.create_user(
        get_store(info),
        UserCreate(name=data.name, email=data.email, age=data.age),
    )
    if error is not None:
        raise error
    return User.from_record(user)
