"""
Exercise Tracker - User Service
=================================

What:  Register-or-fetch, list, and bulk delete for users.
How:   Stateless; every method receives the request's AsyncSession.
       Store failures are logged with traceback and re-raised as
       DatabaseError carrying the operation's client-facing message.

Register flow (POST /api/users):
    SELECT ... WHERE username = :name ─┬─ found ──▶ return it unchanged
                                       └─ missing ─▶ INSERT, flush, return new
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.exceptions import DatabaseError
from exercise_tracker.models.user import User
from exercise_tracker.schemas.common import DeleteResponse, DeleteResult
from exercise_tracker.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class UserService:
    """Business logic for the users collection."""

    async def register_user(
        self, db: AsyncSession, username: Optional[str]
    ) -> UserResponse:
        """
        Return the user named `username`, creating it if it does not exist.

        Sequential calls with the same name return the same identifier.
        A missing/empty name, or a concurrent insert of the same new name,
        is rejected by the store and raised as DatabaseError.
        """
        try:
            result = await db.execute(select(User).where(User.username == username))
            existing = result.scalar_one_or_none()
            if existing is not None:
                logger.debug("User '%s' already registered as %s", username, existing.id)
                return UserResponse(_id=existing.id, username=existing.username)

            user = User(username=username)
            db.add(user)
            await db.flush()
            logger.info("Registered user %s (%s)", user.id, user.username)
            return UserResponse(_id=user.id, username=user.username)

        except Exception as e:
            logger.error("Error creating user %r: %s", username, str(e), exc_info=True)
            raise DatabaseError(
                message="Server error creating user",
                context={"error_type": type(e).__name__},
            )

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        """All users in registration order."""
        try:
            result = await db.execute(
                select(User).order_by(User.created_at.asc(), User.id.asc())
            )
            return [
                UserResponse(_id=user.id, username=user.username)
                for user in result.scalars().all()
            ]
        except Exception as e:
            logger.error("Error listing users: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Server error retrieving users",
                context={"error_type": type(e).__name__},
            )

    async def delete_all(self, db: AsyncSession) -> DeleteResponse:
        """
        Delete every user. Administrative/testing only.

        Failures are reported in the message, never raised: the endpoint
        answers 200 either way.
        """
        logger.warning("Deleting all users")
        try:
            result = await db.execute(delete(User))
            await db.commit()
            return DeleteResponse(
                message="All users have been deleted!",
                result=DeleteResult(deleted_count=max(result.rowcount or 0, 0)),
            )
        except Exception as e:
            logger.error("Deleting all users failed: %s", str(e), exc_info=True)
            await db.rollback()
            return DeleteResponse(message="Deleting all users failed!")


user_service = UserService()
