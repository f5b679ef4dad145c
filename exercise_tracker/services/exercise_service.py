"""
Exercise Tracker - Exercise Service
=====================================

What:  Add exercise entries and answer date-filtered log queries.
How:   Stateless; every method receives the request's AsyncSession.
       Both operations first resolve the owning user (NotFoundError → 404).

Log query:
    SELECT * FROM exercises
    WHERE user_id = :id
      [AND date >= :from]        -- only when `from` parses
      [AND date <= :to]          -- only when `to` parses
    ORDER BY date ASC, created_at ASC
    [LIMIT :n]                   -- only when `limit` parses to a non-zero int
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import asc, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.exceptions import (
    DatabaseError,
    ExerciseTrackerError,
    NotFoundError,
    ValidationError,
)
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User
from exercise_tracker.schemas.common import DeleteResponse, DeleteResult
from exercise_tracker.schemas.exercise import (
    ExerciseCreate,
    ExerciseResponse,
    LogEntry,
    LogResponse,
)
from exercise_tracker.services.coercion import format_date, parse_date, parse_int

logger = logging.getLogger(__name__)

# Largest LIMIT a signed 64-bit bind parameter can carry
MAX_LIMIT = 2**63 - 1


class ExerciseService:
    """Business logic for exercise entries and logs."""

    async def _get_user(self, db: AsyncSession, user_id: str) -> User:
        result = await db.execute(select(User).where(User.id == user_id))
        user = result.scalar_one_or_none()
        if user is None:
            raise NotFoundError(resource="user", resource_id=user_id)
        return user

    @staticmethod
    def _coerce_entry(payload: ExerciseCreate, strict: bool):
        """
        Turn loose form input into (description, duration, date).

        Absent or unparseable dates become the current time. Permissive mode
        passes a malformed duration on as None for the store's NOT NULL
        constraint to refuse; strict mode raises ValidationError for either.
        """
        duration = parse_int(payload.duration)

        raw_date = (payload.date or "").strip()
        date = parse_date(raw_date) if raw_date else None

        if strict:
            if not payload.description:
                raise ValidationError("description is required", field="description")
            if duration is None or duration < 0:
                raise ValidationError(
                    "duration must be a non-negative whole number of minutes",
                    field="duration",
                    context={"value": str(payload.duration)},
                )
            if raw_date and date is None:
                raise ValidationError(
                    "date must be a calendar date such as 2024-01-01",
                    field="date",
                    context={"value": raw_date},
                )

        if date is None:
            date = datetime.now(timezone.utc)

        return payload.description, duration, date

    async def add_exercise(
        self,
        db: AsyncSession,
        user_id: str,
        payload: ExerciseCreate,
        strict: bool = False,
    ) -> ExerciseResponse:
        """
        Record an exercise for an existing user.

        Raises:
            NotFoundError: no user with `user_id` (→ 404)
            ValidationError: malformed input with strict=True (→ 400)
            DatabaseError: the store refused or failed the insert (→ 500)
        """
        try:
            user = await self._get_user(db, user_id)
            description, duration, date = self._coerce_entry(payload, strict)

            exercise = Exercise(
                user_id=user.id,
                description=description,
                duration=duration,
                date=date,
            )
            db.add(exercise)
            await db.flush()
            logger.info(
                "Added exercise %s for user %s (%s min)", exercise.id, user.id, duration
            )

            return ExerciseResponse(
                _id=user.id,
                username=user.username,
                description=exercise.description,
                duration=exercise.duration,
                date=format_date(exercise.date),
            )

        except ExerciseTrackerError:
            raise
        except Exception as e:
            logger.error(
                "Error adding exercise for user %s: %s", user_id, str(e), exc_info=True
            )
            raise DatabaseError(
                message="Server error adding exercise",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )

    async def get_log(
        self,
        db: AsyncSession,
        user_id: str,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> LogResponse:
        """
        A user's exercises, oldest first, optionally bounded and capped.

        `from`/`to` are inclusive; a bound that does not parse is ignored.
        A negative limit caps at its absolute value; 0 or unparseable means
        no cap.
        """
        try:
            user = await self._get_user(db, user_id)

            query = select(Exercise).where(Exercise.user_id == user.id)

            from_dt = parse_date(from_date)
            if from_dt is not None:
                query = query.where(Exercise.date >= from_dt)

            to_dt = parse_date(to_date)
            if to_dt is not None:
                query = query.where(Exercise.date <= to_dt)

            query = query.order_by(asc(Exercise.date), asc(Exercise.created_at))

            cap = parse_int(limit)
            if cap:
                query = query.limit(min(abs(cap), MAX_LIMIT))

            result = await db.execute(query)
            log = [
                LogEntry(
                    _id=entry.id,
                    description=entry.description,
                    duration=entry.duration,
                    date=format_date(entry.date),
                )
                for entry in result.scalars().all()
            ]

            return LogResponse(
                _id=user.id,
                username=user.username,
                count=len(log),
                log=log,
            )

        except ExerciseTrackerError:
            raise
        except Exception as e:
            logger.error(
                "Error retrieving log for user %s: %s", user_id, str(e), exc_info=True
            )
            raise DatabaseError(
                message="Server error retrieving exercise log",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )

    async def delete_all(self, db: AsyncSession) -> DeleteResponse:
        """Delete every exercise entry. Failures are reported, not raised."""
        logger.warning("Deleting all exercises")
        try:
            result = await db.execute(delete(Exercise))
            await db.commit()
            return DeleteResponse(
                message="All exercises have been deleted!",
                result=DeleteResult(deleted_count=max(result.rowcount or 0, 0)),
            )
        except Exception as e:
            logger.error("Deleting all exercises failed: %s", str(e), exc_info=True)
            await db.rollback()
            return DeleteResponse(message="Deleting all exercises failed!")


exercise_service = ExerciseService()
