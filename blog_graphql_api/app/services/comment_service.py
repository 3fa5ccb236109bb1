"""
Business logic for comments.

Comments can only be attached to published posts.  A post that exists
but is unpublished is reported with the same error as a missing post
("User or post does not exist"); callers cannot tell the two apart.
"""

import logging
from typing import List, Optional, Tuple

from ..core.errors import ValidationError
from ..core.store import EntityStore
from ..schemas.comment import CommentCreate, CommentRecord


class CommentService:
    """Queries and mutations on the comment collection."""

    @classmethod
    def list_comments(cls, store: EntityStore) -> List[CommentRecord]:
        return store.comments.all()

    @classmethod
    def create_comment(
        cls, store: EntityStore, data: CommentCreate
    ) -> Tuple[Optional[CommentRecord], Optional[ValidationError]]:
        """Append a new comment by ``data.author`` on ``data.post``."""
        logger = logging.getLogger(__name__)
        with store.writer():
            user_exists = store.users.exists(lambda user: user.id == data.author)
            post_exists = store.posts.exists(
                lambda post: post.id == data.post and post.published
            )
            if not user_exists or not post_exists:
                logger.warning(
                    "Rejected comment: user %s exists=%s, published post %s exists=%s",
                    data.author,
                    user_exists,
                    data.post,
                    post_exists,
                )
                return None, ValidationError("User or post does not exist")
            comment = CommentRecord(id=store.new_id(), **data.model_dump())
            store.comments.append(comment)
        logger.info("Created comment %s on post %s", comment.id, comment.post)
        return comment, None
