"""
Post resolvers for API v1.

``posts`` searches titles and bodies, ``post`` returns a fixed demo
post and ``createPost`` publishes a post for an existing user.
"""

from typing import List, Optional

from strawberry.types import Info

from ....core.errors import ValidationError
from ....schemas.post import PostCreate
from ....services.post_service import PostService
from ..context import get_store
from ..types import CreatePostInput, Post


def resolve_posts(info: Info, query: Optional[str] = None) -> List[Post]:
    return [Post.from_record(post) for post in PostService.list_posts(get_store(info), query)]


def resolve_post() -> Post:
    return Post.from_record(PostService.post())


def resolve_create_post(info: Info, data: Optional[CreatePostInput] = None) -> Post:
    """Create a post.  Fails with ``User not exist`` for an unknown author."""
    if data is None:
        raise ValidationError("Missing post data")
    post, error = PostService.create_post(
        get_store(info),
        PostCreate(
            title=data.title,
            body=data.body,
            published=data.published,
            author=str(data.author),
        ),
    )
    if error is not None:
        raise error
    return Post.from_record(post)
