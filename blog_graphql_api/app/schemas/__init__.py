"""
Pydantic schema definitions for the entity records.

Each entity defines a ``*Create`` model describing mutation input and a
``*Record`` model for the immutable record held by the entity store.
The GraphQL types in ``api/v1/types.py`` are built from the records, so
the wire representation stays decoupled from storage.
"""

from .comment import CommentCreate, CommentRecord
from .post import PostCreate, PostRecord
from .user import UserCreate, UserRecord

__all__ = [
    "CommentCreate",
    "CommentRecord",
    "PostCreate",
    "PostRecord",
    "UserCreate",
    "UserRecord",
]
