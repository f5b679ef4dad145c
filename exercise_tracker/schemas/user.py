"""
Exercise Tracker - User Schemas
=================================

What:  Pydantic models for the /api/users request and response bodies.

Identifiers are exposed as `_id`. Pydantic does not allow a field name with a
leading underscore, so the field is `id` with a serialization alias; FastAPI
dumps response models by alias.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from exercise_tracker.schemas.common import loose_text


class UserCreate(BaseModel):
    """
    Body of POST /api/users (form-encoded or JSON).

    `username` is not validated here: a missing or empty name is refused by
    the store and reported as a server error. Numeric JSON names are cast to
    text, so {"username": 123} registers "123".
    """
    username: Optional[str] = Field(default=None, description="Name to register or look up")

    @field_validator("username", mode="before")
    @classmethod
    def cast_username(cls, value):
        return loose_text(value)


class UserResponse(BaseModel):
    """A user as returned by register and list."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id", description="Opaque user identifier")
    username: str = Field(description="Unique username")
