"""
Exercise Tracker - Users Route Handlers
=========================================

What:  Register/list users, add exercises, read logs, and the admin user reset.
How:   Each handler extracts its inputs and delegates to UserService or
       ExerciseService. Errors propagate to the global exception handlers.

Request Flow (POST /api/users/{user_id}/exercises):
    1. Body parsed from form fields or JSON (routes/body.py)
    2. ExerciseService resolves the user (404 if missing)
    3. duration/date coerced, entry inserted
    4. Response echoes the user plus the new entry, date as "Mon Jan 01 2024"
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.database import get_db_session
from exercise_tracker.routes.body import exercise_body, user_body
from exercise_tracker.schemas.common import DeleteResponse, ErrorResponse
from exercise_tracker.schemas.exercise import ExerciseCreate, ExerciseResponse, LogResponse
from exercise_tracker.schemas.user import UserCreate, UserResponse
from exercise_tracker.services.exercise_service import exercise_service
from exercise_tracker.services.user_service import user_service

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponse,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="Register a user, or fetch it if the username exists",
)
async def register_user(
    payload: UserCreate = Depends(user_body),
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    """Idempotent by username: registering the same name twice returns the same `_id`."""
    return await user_service.register_user(db=db, username=payload.username)


@router.get(
    "",
    response_model=List[UserResponse],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List all users",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    return await user_service.list_users(db=db)


@router.get(
    "/delete",
    response_model=DeleteResponse,
    response_model_exclude_none=True,
    summary="Delete all users (administrative/testing only)",
    description="Always answers 200; a failure is reported in `message`.",
)
async def delete_all_users(db: AsyncSession = Depends(get_db_session)) -> DeleteResponse:
    return await user_service.delete_all(db=db)


@router.post(
    "/{user_id}/exercises",
    response_model=ExerciseResponse,
    responses={
        400: {"description": "Malformed input (strict input only)", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Add an exercise to a user's log",
)
async def add_exercise(
    user_id: str,
    request: Request,
    payload: ExerciseCreate = Depends(exercise_body),
    db: AsyncSession = Depends(get_db_session),
) -> ExerciseResponse:
    strict = request.app.state.settings.strict_input
    return await exercise_service.add_exercise(
        db=db,
        user_id=user_id,
        payload=payload,
        strict=strict,
    )


@router.get(
    "/{user_id}/logs",
    response_model=LogResponse,
    responses={
        404: {"description": "User not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Get a user's exercise log",
    description=(
        "Entries are sorted oldest first. `from` and `to` bound the date "
        "inclusively; `limit` caps the number of entries returned."
    ),
)
async def get_log(
    user_id: str,
    from_date: Optional[str] = Query(
        default=None, alias="from", description="Earliest date, e.g. 2024-01-01"
    ),
    to_date: Optional[str] = Query(
        default=None, alias="to", description="Latest date, e.g. 2024-01-31"
    ),
    limit: Optional[str] = Query(default=None, description="Maximum entries to return"),
    db: AsyncSession = Depends(get_db_session),
) -> LogResponse:
    return await exercise_service.get_log(
        db=db,
        user_id=user_id,
        from_date=from_date,
        to_date=to_date,
        limit=limit,
    )
