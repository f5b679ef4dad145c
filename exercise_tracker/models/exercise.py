"""
Exercise Tracker - Exercise Model
===================================

What:  ORM model for the `exercises` table (one row per log entry).
Who:   Used by ExerciseService for add, log query and bulk delete.

Table Design:
    - user_id: references users.id by value only. There is deliberately no
      foreign key; the handler checks the user exists before inserting.
    - duration: whole minutes
    - date: UTC timestamp of the exercise; defaults to insertion time
    - created_at: insertion timestamp, tie-breaker for entries sharing a date

    Index on (user_id, date) serves the log query:
        SELECT ... WHERE user_id = :id AND date >= :from AND date <= :to
        ORDER BY date ASC LIMIT :n
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from exercise_tracker.database import Base
from exercise_tracker.models.user import generate_id


class Exercise(Base):
    """An exercise log entry. Immutable after creation."""

    __tablename__ = "exercises"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_id,
    )

    user_id: Mapped[str] = mapped_column(String(36), nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    duration: Mapped[int] = mapped_column(Integer, nullable=False)

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    __table_args__ = (
        Index("idx_exercises_user_id_date", "user_id", "date"),
        CheckConstraint(
            "length(description) > 0", name="ck_exercises_description_not_empty"
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<Exercise(id={self.id}, user_id={self.user_id}, "
            f"duration={self.duration}, date='{self.date}')>"
        )
