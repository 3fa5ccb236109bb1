"""
Business logic for posts.

A post may only be created for a user that exists.  The ``published``
flag is taken verbatim from the input.
"""

import logging
from typing import List, Optional, Tuple

from ..core.errors import ValidationError
from ..core.seed import POST_STUB
from ..core.store import EntityStore
from ..schemas.post import PostCreate, PostRecord


class PostService:
    """Queries and mutations on the post collection."""

    @classmethod
    def list_posts(cls, store: EntityStore, query: Optional[str] = None) -> List[PostRecord]:
        """Return all posts, or those whose title or body contains ``query``.

        Both fields are compared case‑insensitively.  Order follows
        insertion order in the store.
        """
        if not query:
            return store.posts.all()
        needle = query.lower()
        return store.posts.filter(
            lambda post: needle in post.title.lower() or needle in post.body.lower()
        )

    @classmethod
    def post(cls) -> PostRecord:
        """Return the hardcoded demo post.  It is not part of the store."""
        return PostRecord(**POST_STUB)

    @classmethod
    def create_post(
        cls, store: EntityStore, data: PostCreate
    ) -> Tuple[Optional[PostRecord], Optional[ValidationError]]:
        """Append a new post written by ``data.author``."""
        logger = logging.getLogger(__name__)
        with store.writer():
            if not store.users.exists(lambda user: user.id == data.author):
                logger.warning("Rejected post %r: unknown author %s", data.title, data.author)
                return None, ValidationError("User not exist")
            post = PostRecord(id=store.new_id(), **data.model_dump())
            store.posts.append(post)
        logger.info("Created post %s by user %s", post.id, post.author)
        return post, None
