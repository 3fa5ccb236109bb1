"""
GraphQL object and input types.

Object types are built from store records with ``from_record`` and keep
the record as a private attribute.  Relation fields are resolved lazily,
only when a query selects them, by the lookup registered for that field
in ``RESOLVER_MAP``.

``Post.author``, ``Comment.author`` and ``Comment.post`` are nullable:
a reference to a record that does not exist resolves to ``null``
instead of failing the whole parent object.
"""

from typing import Any, List, Optional

import strawberry
from strawberry.types import Info

from ...schemas import CommentRecord, PostRecord, UserRecord
from .context import get_store


def _related(type_name: str, field_name: str, info: Info, record: Any) -> Any:
    # schema.py imports this module to build Query and Mutation.
    from .schema import RESOLVER_MAP

    return RESOLVER_MAP[(type_name, field_name)](get_store(info), record)


@strawberry.type
class User:
    id: strawberry.ID
    name: str
    email: str
    age: Optional[int]
    record: strawberry.Private[UserRecord]

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            email=record.email,
            age=record.age,
            record=record,
        )

    @strawberry.field
    def posts(self, info: Info) -> List["Post"]:
        return [Post.from_record(post) for post in _related("User", "posts", info, self.record)]

    @strawberry.field
    def comments(self, info: Info) -> List["Comment"]:
        return [
            Comment.from_record(comment)
            for comment in _related("User", "comments", info, self.record)
        ]


@strawberry.type
class Post:
    id: strawberry.ID
    title: str
    body: str
    published: bool
    record: strawberry.Private[PostRecord]

    @classmethod
    def from_record(cls, record: PostRecord) -> "Post":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            body=record.body,
            published=record.published,
            record=record,
        )

    @strawberry.field
    def author(self, info: Info) -> Optional[User]:
        user = _related("Post", "author", info, self.record)
        return User.from_record(user) if user is not None else None

    @strawberry.field
    def comments(self, info: Info) -> List["Comment"]:
        return [
            Comment.from_record(comment)
            for comment in _related("Post", "comments", info, self.record)
        ]


@strawberry.type
class Comment:
    id: strawberry.ID
    text: str
    record: strawberry.Private[CommentRecord]

    @classmethod
    def from_record(cls, record: CommentRecord) -> "Comment":
        return cls(id=strawberry.ID(record.id), text=record.text, record=record)

    @strawberry.field
    def author(self, info: Info) -> Optional[User]:
        user = _related("Comment", "author", info, self.record)
        return User.from_record(user) if user is not None else None

    @strawberry.field
    def post(self, info: Info) -> Optional[Post]:
        post = _related("Comment", "post", info, self.record)
        return Post.from_record(post) if post is not None else None


@strawberry.input
class CreateUserInput:
    name: str
    email: str
    age: Optional[int] = None


@strawberry.input
class CreatePostInput:
    title: str
    body: str
    published: bool
    author: strawberry.ID


@strawberry.input
class CreateCommentInput:
    text: str
    author: strawberry.ID
    post: strawberry.ID
