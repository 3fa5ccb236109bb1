"""
In‑memory entity store.

``EntityStore`` is the single source of truth for users, posts and
comments.  It owns one append‑only ``Collection`` per entity and the
identifier generator used for new records.  There is no update or
delete; records are frozen pydantic models.

The store is created once per application by ``init_store`` and handed
to resolvers through the GraphQL context, so tests can build isolated
stores with a deterministic identifier generator.

Mutations must perform their precondition check and the append inside
``EntityStore.writer()``.  The lock serialises writers; readers work on
snapshot copies and never block.
"""

import logging
import threading
import uuid
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from ..schemas import CommentRecord, PostRecord, UserRecord
from .seed import DEMO_COMMENTS, DEMO_POSTS, DEMO_USERS

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def new_id() -> str:
    """Return a random UUID4 string."""
    return str(uuid.uuid4())


class Collection(Generic[RecordT]):
    """An ordered, append‑only sequence of records."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: List[RecordT] = []

    def all(self) -> List[RecordT]:
        """Return a snapshot of all records in insertion order."""
        return list(self._records)

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        """Return the first record matching ``predicate`` or ``None``."""
        return next((record for record in self._records if predicate(record)), None)

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [record for record in self._records if predicate(record)]

    def exists(self, predicate: Callable[[RecordT], bool]) -> bool:
        return any(predicate(record) for record in self._records)

    def append(self, record: RecordT) -> RecordT:
        self._records.append(record)
        return record

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self.all())


class EntityStore:
    """Holds the user, post and comment collections.

    Parameters
    ----------
    id_factory : Callable[[], str]
        Source of identifiers for new records.  Defaults to random
        UUID4 strings.
    """

    def __init__(self, id_factory: Callable[[], str] = new_id) -> None:
        self.users: Collection[UserRecord] = Collection("users")
        self.posts: Collection[PostRecord] = Collection("posts")
        self.comments: Collection[CommentRecord] = Collection("comments")
        self._id_factory = id_factory
        self._lock = threading.RLock()

    def new_id(self) -> str:
        return self._id_factory()

    @contextmanager
    def writer(self) -> Iterator["EntityStore"]:
        """Hold the single‑writer lock for a check‑then‑append sequence."""
        with self._lock:
            yield self

    def seed(self) -> None:
        """Append the demo users, posts and comments."""
        with self.writer():
            for data in DEMO_USERS:
                self.users.append(UserRecord(**data))
            for data in DEMO_POSTS:
                self.posts.append(PostRecord(**data))
            for data in DEMO_COMMENTS:
                self.comments.append(CommentRecord(**data))
        logger.info(
            "Seeded store with %d users, %d posts, %d comments",
            len(self.users),
            len(self.posts),
            len(self.comments),
        )

    def counts(self) -> dict:
        return {
            "users": len(self.users),
            "posts": len(self.posts),
            "comments": len(self.comments),
        }


def init_store(seed: bool = True, id_factory: Callable[[], str] = new_id) -> EntityStore:
    """Create a new store, optionally populated with the demo data."""
    store = EntityStore(id_factory=id_factory)
    if seed:
        store.seed()
    return store
