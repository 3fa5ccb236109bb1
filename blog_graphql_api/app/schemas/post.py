"""
Pydantic models for posts.

``author`` holds the identifier of the writing user.  The relation is
resolved by scanning the user collection, it is never stored as an
object reference.
"""

from pydantic import BaseModel, Field


class PostBase(BaseModel):
    title: str = Field(..., examples=["Habits to work on"])
    body: str = Field(..., examples=["Jog for 20 mins"])
    published: bool = Field(..., examples=[True])
    author: str = Field(..., description="Identifier of the user who wrote the post")


class PostCreate(PostBase):
    """Input for ``createPost``.  ``published`` has no default."""


class PostRecord(PostBase):
    """A post as stored in the entity store."""

    id: str

    model_config = {
        "frozen": True,
    }
