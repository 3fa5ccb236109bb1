"""
Relation resolution between users, posts and comments.

Every relation is computed on demand by scanning the relevant
collection and joining on identifiers.  Nothing is cached: the result
always reflects the current contents of the store.  Single‑valued
relations return ``None`` when the referenced record does not exist.
"""

from typing import List, Optional

from ..core.store import EntityStore
from ..schemas import CommentRecord, PostRecord, UserRecord


class RelationService:
    """Read‑only lookups of related records for a parent record."""

    @classmethod
    def post_author(cls, store: EntityStore, post: PostRecord) -> Optional[UserRecord]:
        return store.users.find(lambda user: user.id == post.author)

    @classmethod
    def post_comments(cls, store: EntityStore, post: PostRecord) -> List[CommentRecord]:
        return store.comments.filter(lambda comment: comment.post == post.id)

    @classmethod
    def comment_author(cls, store: EntityStore, comment: CommentRecord) -> Optional[UserRecord]:
        return store.users.find(lambda user: user.id == comment.author)

    @classmethod
    def comment_post(cls, store: EntityStore, comment: CommentRecord) -> Optional[PostRecord]:
        return store.posts.find(lambda post: post.id == comment.post)

    @classmethod
    def user_posts(cls, store: EntityStore, user: UserRecord) -> List[PostRecord]:
        return store.posts.filter(lambda post: post.author == user.id)

    @classmethod
    def user_comments(cls, store: EntityStore, user: UserRecord) -> List[CommentRecord]:
        return store.comments.filter(lambda comment: comment.author == user.id)
