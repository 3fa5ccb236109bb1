"""Pydantic models for comments."""

from pydantic import BaseModel, Field


class CommentBase(BaseModel):
    text: str = Field(..., examples=["GraphQL is cool!"])
    author: str = Field(..., description="Identifier of the commenting user")
    post: str = Field(..., description="Identifier of the commented post")


class CommentCreate(CommentBase):
    pass


class CommentRecord(CommentBase):
    id: str

    model_config = {
        "frozen": True,
    }
