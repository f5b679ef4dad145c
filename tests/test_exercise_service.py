"""
Exercise Tracker - Exercise Service Unit Tests
================================================

What:  Tests for ExerciseService with a mocked AsyncSession.

What we test:
    ✅ Unknown user raises NotFoundError for add and log
    ✅ Added entry echoes the user and renders the date
    ✅ Strict input rejects malformed duration/date; permissive passes them on
    ✅ Log response count matches the entries returned
"""

from datetime import datetime, timezone

import pytest
from unittest.mock import AsyncMock, MagicMock

from exercise_tracker.exceptions import DatabaseError, NotFoundError, ValidationError
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User
from exercise_tracker.schemas.exercise import ExerciseCreate
from exercise_tracker.services.exercise_service import ExerciseService


def _lookup_result(user):
    result = MagicMock()
    result.scalar_one_or_none.return_value = user
    return result


def _rows_result(rows):
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


ALICE = User(id="user-1", username="alice")


class TestAddExercise:

    def setup_method(self):
        self.service = ExerciseService()

    @pytest.mark.asyncio
    async def test_unknown_user(self, mock_db_session):
        mock_db_session.execute.return_value = _lookup_result(None)

        with pytest.raises(NotFoundError, match="User not found"):
            await self.service.add_exercise(
                mock_db_session, "missing", ExerciseCreate(description="run", duration="30")
            )
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_response_echoes_user_and_entry(self, mock_db_session):
        mock_db_session.execute.return_value = _lookup_result(ALICE)
        payload = ExerciseCreate(description="run", duration="30", date="2024-01-01")

        result = await self.service.add_exercise(mock_db_session, "user-1", payload)

        assert result.model_dump(by_alias=True) == {
            "_id": "user-1",
            "username": "alice",
            "description": "run",
            "duration": 30,
            "date": "Mon Jan 01 2024",
        }
        added = mock_db_session.add.call_args.args[0]
        assert added.user_id == "user-1"
        assert added.date == datetime(2024, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_missing_date_defaults_to_now(self, mock_db_session):
        mock_db_session.execute.return_value = _lookup_result(ALICE)
        before = datetime.now(timezone.utc)

        await self.service.add_exercise(
            mock_db_session, "user-1", ExerciseCreate(description="swim", duration=15)
        )

        added = mock_db_session.add.call_args.args[0]
        assert added.date >= before

    @pytest.mark.asyncio
    async def test_permissive_passes_bad_duration_to_store(self, mock_db_session):
        mock_db_session.execute.return_value = _lookup_result(ALICE)
        mock_db_session.flush = AsyncMock(side_effect=RuntimeError("NOT NULL constraint failed"))

        with pytest.raises(DatabaseError, match="Server error adding exercise"):
            await self.service.add_exercise(
                mock_db_session, "user-1", ExerciseCreate(description="run", duration="abc")
            )
        added = mock_db_session.add.call_args.args[0]
        assert added.duration is None

    @pytest.mark.asyncio
    async def test_strict_rejects_bad_duration(self, mock_db_session):
        mock_db_session.execute.return_value = _lookup_result(ALICE)

        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_exercise(
                mock_db_session,
                "user-1",
                ExerciseCreate(description="run", duration="abc"),
                strict=True,
            )
        assert exc_info.value.field == "duration"
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_strict_rejects_bad_date(self, mock_db_session):
        mock_db_session.execute.return_value = _lookup_result(ALICE)

        with pytest.raises(ValidationError) as exc_info:
            await self.service.add_exercise(
                mock_db_session,
                "user-1",
                ExerciseCreate(description="run", duration="10", date="someday"),
                strict=True,
            )
        assert exc_info.value.field == "date"


class TestGetLog:

    def setup_method(self):
        self.service = ExerciseService()

    @pytest.mark.asyncio
    async def test_unknown_user(self, mock_db_session):
        mock_db_session.execute.return_value = _lookup_result(None)

        with pytest.raises(NotFoundError):
            await self.service.get_log(mock_db_session, "missing")

    @pytest.mark.asyncio
    async def test_count_matches_log(self, mock_db_session):
        rows = [
            Exercise(
                id="e1", user_id="user-1", description="run", duration=30,
                date=datetime(2024, 1, 1, tzinfo=timezone.utc),
            ),
            Exercise(
                id="e2", user_id="user-1", description="bike", duration=45,
                date=datetime(2024, 1, 2, 18, 0),
            ),
        ]
        mock_db_session.execute = AsyncMock(
            side_effect=[_lookup_result(ALICE), _rows_result(rows)]
        )

        result = await self.service.get_log(mock_db_session, "user-1", limit="10")

        assert result.count == 2
        assert [entry.date for entry in result.log] == ["Mon Jan 01 2024", "Tue Jan 02 2024"]
        assert result.model_dump(by_alias=True)["log"][0] == {
            "_id": "e1",
            "description": "run",
            "duration": 30,
            "date": "Mon Jan 01 2024",
        }

    @pytest.mark.asyncio
    async def test_query_failure_is_wrapped(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=[_lookup_result(ALICE), RuntimeError("connection lost")]
        )

        with pytest.raises(DatabaseError, match="Server error retrieving exercise log"):
            await self.service.get_log(mock_db_session, "user-1")


class TestDeleteAll:

    @pytest.mark.asyncio
    async def test_failure_is_reported_not_raised(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=RuntimeError("connection lost"))

        response = await ExerciseService().delete_all(mock_db_session)

        assert response.message == "Deleting all exercises failed!"
        assert response.result is None
