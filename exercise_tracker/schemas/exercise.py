"""
Exercise Tracker - Exercise and Log Schemas
=============================================

What:  Pydantic models for adding exercises and reading a user's log.

`duration` and `date` arrive as loose text and are coerced by the service
(see services/coercion.py). JSON scalars are cast to text first, so a JSON
body behaves like the equivalent form post.
Dates leave the API as "Mon Jan 01 2024" strings.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from exercise_tracker.schemas.common import loose_text


class ExerciseCreate(BaseModel):
    """Body of POST /api/users/{_id}/exercises (form-encoded or JSON)."""
    description: Optional[str] = Field(default=None, description="What was done")
    duration: Optional[str] = Field(
        default=None,
        description="Minutes; parsed as a truncated integer (\"30.5\" → 30)",
    )
    date: Optional[str] = Field(
        default=None,
        description="Calendar date (ISO 8601, e.g. 2024-01-01). Defaults to now.",
    )

    @field_validator("description", "duration", "date", mode="before")
    @classmethod
    def cast_to_text(cls, value):
        return loose_text(value)


class ExerciseResponse(BaseModel):
    """
    Response to adding an exercise.

    `_id` is the owning user's identifier, not the new entry's.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id", description="Owning user's identifier")
    username: str
    description: str
    duration: int
    date: str = Field(description="Human-readable date, e.g. 'Mon Jan 01 2024'")


class LogEntry(BaseModel):
    """One element of a log response."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id", description="Exercise entry identifier")
    description: str
    duration: int
    date: str


class LogResponse(BaseModel):
    """A user's filtered log; `count` always equals len(log)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id", description="User identifier")
    username: str
    count: int
    log: List[LogEntry]
