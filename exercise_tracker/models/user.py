"""
Exercise Tracker - User Model
===============================

What:  ORM model for the `users` table.
Who:   Used by UserService (register, list, bulk delete) and by
       ExerciseService to resolve the owner of a log.

Table Design:
    - id: UUID4 text generated in Python; opaque to clients (serialized as `_id`)
    - username: NOT NULL, non-empty, unique index
    - created_at: insertion timestamp; the list endpoint orders by it so users
      come back in the order they registered

    The unique index makes the store the authority on username uniqueness.
    Registration still does lookup-then-insert, so two concurrent requests
    for a new name can both miss the lookup; the loser's insert is rejected
    by the index and reported as a server error.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from exercise_tracker.database import Base


def generate_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """A registered user. Never updated; removed only by bulk delete."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_id,
    )

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    __table_args__ = (
        CheckConstraint("length(username) > 0", name="ck_users_username_not_empty"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
