"""Comment resolvers for API v1."""

from typing import List, Optional

from strawberry.types import Info

from ....core.errors import ValidationError
from ....schemas.comment import CommentCreate
from ....services.comment_service import CommentService
from ..context import get_store
from ..types import Comment, CreateCommentInput


def resolve_comments(info: Info) -> List[Comment]:
    return [Comment.from_record(comment) for comment in CommentService.list_comments(get_store(info))]


def resolve_create_comment(info: Info, data: Optional[CreateCommentInput] = None) -> Comment:
    """Create a comment on a published post.

    An unpublished post is reported exactly like a missing one.
    """
    if data is None:
        raise ValidationError("Missing comment data")
    comment, error = CommentService.create_comment(
        get_store(info),
        CommentCreate(text=data.text, author=str(data.author), post=str(data.post)),
    )
    if error is not None:
        raise error
    return Comment.from_record(comment)
