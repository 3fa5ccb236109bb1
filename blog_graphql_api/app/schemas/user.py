"""
Pydantic models for user data.

E‑mail uniqueness is not something a model can check on its own; it is
enforced by ``UserService.create_user`` against the store.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["Tae"])
    email: str = Field(..., examples=["tae@example.com"])
    age: Optional[int] = Field(None, examples=[36])


class UserCreate(UserBase):
    """Input for ``createUser``."""


class UserRecord(UserBase):
    """A user as stored in the entity store."""

    id: str

    model_config = {
        "frozen": True,
    }
