"""
Business logic for users.

Users are kept in the in‑memory entity store.  E‑mail addresses are
unique across all users; the check is an exact, case‑sensitive
comparison performed when the user is created.
"""

import logging
from typing import List, Optional, Tuple

from ..core.errors import ConflictError
from ..core.seed import ME_STUB
from ..core.store import EntityStore
from ..schemas.user import UserCreate, UserRecord


class UserService:
    """Queries and mutations on the user collection."""

    @classmethod
    def list_users(cls, store: EntityStore, query: Optional[str] = None) -> List[UserRecord]:
        """Return all users, or those whose name contains ``query``.

        The match is a case‑insensitive substring search.  An empty or
        missing ``query`` returns every user in insertion order.
        """
        if not query:
            return store.users.all()
        needle = query.lower()
        return store.users.filter(lambda user: needle in user.name.lower())

    @classmethod
    def me(cls) -> UserRecord:
        """Return the hardcoded demo user.  It is not part of the store."""
        return UserRecord(**ME_STUB)

    @classmethod
    def create_user(
        cls, store: EntityStore, data: UserCreate
    ) -> Tuple[Optional[UserRecord], Optional[ConflictError]]:
        """Append a new user unless the e‑mail is already taken."""
        logger = logging.getLogger(__name__)
        with store.writer():
            if store.users.exists(lambda user: user.email == data.email):
                logger.warning("Rejected user %s: email taken", data.email)
                return None, ConflictError("Email taken.")
            user = UserRecord(id=store.new_id(), **data.model_dump())
            store.users.append(user)
        logger.info("Created user %s", user.id)
        return user, None
