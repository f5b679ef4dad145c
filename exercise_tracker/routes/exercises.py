"""Exercise collection admin routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.database import get_db_session
from exercise_tracker.schemas.common import DeleteResponse
from exercise_tracker.services.exercise_service import exercise_service

router = APIRouter(prefix="/api/exercises", tags=["Exercises"])


@router.get(
    "/delete",
    response_model=DeleteResponse,
    response_model_exclude_none=True,
    summary="Delete all exercises (administrative/testing only)",
    description="Always answers 200; a failure is reported in `message`.",
)
async def delete_all_exercises(
    db: AsyncSession = Depends(get_db_session),
) -> DeleteResponse:
    return await exercise_service.delete_all(db=db)
