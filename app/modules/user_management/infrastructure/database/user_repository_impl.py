# 📄 File: app/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for user accounts, like creating new users,
# finding existing users, updating their information, and deleting them.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the UserRepository interface using SQLAlchemy ORM, providing
# async database operations for user entities with error translation and logging.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.user_repository (interface)
# - app.modules.user_management.domain.models.user (domain model)
# - app.modules.user_management.infrastructure.database.models (SQLAlchemy models)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (request-scoped repository)
# - scripts/seed_users.py

"""
User Repository Implementation

Handles the mapping between domain User entities and UserModel database
records.

Features:
- Async database operations
- Unique-email violations translated into DuplicateEmailError (create)
  and EmailConflictError (update)
- Other SQLAlchemy failures wrapped as DatabaseError
- Ids and timestamps assigned here, not by database defaults
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.models.user import CreateUserData, UpdateUserData, User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.infrastructure.database.models import UserModel
from app.shared.core.exceptions import (
    DatabaseError,
    DuplicateEmailError,
    EmailConflictError,
    RepositoryError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


EMAIL_UNIQUE_INDEX = "ix_users_email"

# SQLite names the violated column rather than the index
_SQLITE_EMAIL_VIOLATION = "UNIQUE constraint failed: users.email"


def _violated_constraint(error: IntegrityError) -> Optional[str]:
    """Constraint name reported by the driver (asyncpg), if any."""
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None


def _is_email_violation(error: IntegrityError) -> bool:
    """True when the IntegrityError came from the unique index on users.email."""
    constraint = _violated_constraint(error)
    if constraint is not None:
        return constraint == EMAIL_UNIQUE_INDEX

    message = str(error.orig)
    return f"\"{EMAIL_UNIQUE_INDEX}\"" in message or _SQLITE_EMAIL_VIOLATION in message


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.

    The session's transaction is owned by the caller (see
    DatabaseSessionManager.get_session); this class only flushes.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the user repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def create(self, data: CreateUserData) -> User:
        """
        Create a new user in the database.

        Raises:
            DuplicateEmailError: If the email unique index rejects the row
            RepositoryError: For any other constraint violation
            DatabaseError: For other database errors
        """
        now = datetime.now(timezone.utc)
        user_model = UserModel(
            id=str(uuid4()),
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            age=data.age,
            created_at=now,
            updated_at=now,
        )

        try:
            self._session.add(user_model)
            await self._session.flush()

        except IntegrityError as e:
            await self._session.rollback()
            if _is_email_violation(e):
                logger.warning(f"User creation failed - email already exists: {data.email}")
                raise DuplicateEmailError(data.email) from e
            logger.error(f"Constraint violation during user creation: {e.orig}")
            raise RepositoryError(
                "Failed to create user", operation="create", entity="User"
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during user creation: {str(e)}")
            raise DatabaseError(
                f"Failed to create user: {str(e)}", operation="create", table="users"
            ) from e

        logger.info(f"Created user with ID: {user_model.id}")
        return self._model_to_domain(user_model)

    async def find_all(self) -> List[User]:
        try:
            stmt = select(UserModel).order_by(UserModel.created_at.desc())
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing users: {str(e)}")
            raise DatabaseError(
                f"Failed to list users: {str(e)}", operation="find_all", table="users"
            ) from e

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by their ID.

        Returns:
            Optional[User]: User entity if found, None otherwise
        """
        user_model = await self._get_model(user_id)
        if user_model is None:
            logger.debug(f"User not found: {user_id}")
            return None
        return self._model_to_domain(user_model)

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve a user by their exact email address.
        """
        try:
            stmt = select(UserModel).where(UserModel.email == email)
            result = await self._session.execute(stmt)
            user_model = result.scalar_one_or_none()

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user by email {email}: {str(e)}")
            raise DatabaseError(
                f"Failed to retrieve user by email: {str(e)}",
                operation="find_by_email",
                table="users",
            ) from e

        if user_model is None:
            logger.debug(f"User not found by email: {email}")
            return None
        return self._model_to_domain(user_model)

    async def update(self, user_id: str, data: UpdateUserData) -> User:
        """
        Apply the supplied fields and advance updated_at.

        Raises:
            UserNotFoundError: If no row has this id
            EmailConflictError: If the email unique index rejects the change
        """
        user_model = await self._get_model(user_id)
        if user_model is None:
            raise UserNotFoundError(user_id)

        for field, value in data.changes().items():
            setattr(user_model, field, value)
        previous = self._as_utc(user_model.updated_at)
        now = datetime.now(timezone.utc)
        user_model.updated_at = now if now > previous else previous + timedelta(microseconds=1)

        try:
            await self._session.flush()

        except IntegrityError as e:
            await self._session.rollback()
            if _is_email_violation(e):
                logger.warning(f"User update failed - email already in use: {data.email}")
                raise EmailConflictError(user_id, data.email) from e
            logger.error(f"Constraint violation during user update: {e.orig}")
            raise RepositoryError(
                "Failed to update user", operation="update", entity="User"
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating user {user_id}: {str(e)}")
            raise DatabaseError(
                f"Failed to update user: {str(e)}", operation="update", table="users"
            ) from e

        logger.info(f"Updated user: {user_id}")
        return self._model_to_domain(user_model)

    async def delete(self, user_id: str) -> None:
        """
        Hard delete a user.

        Raises:
            UserNotFoundError: If no row has this id
        """
        try:
            stmt = delete(UserModel).where(UserModel.id == user_id)
            result = await self._session.execute(stmt)
            await self._session.flush()

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error deleting user {user_id}: {str(e)}")
            raise DatabaseError(
                f"Failed to delete user: {str(e)}", operation="delete", table="users"
            ) from e

        if result.rowcount == 0:
            raise UserNotFoundError(user_id)

        logger.info(f"Deleted user: {user_id}")

    async def delete_all(self) -> int:
        """
        Remove every user. Used by the seed script only.

        Returns:
            int: Number of rows deleted
        """
        result = await self._session.execute(delete(UserModel))
        await self._session.flush()
        logger.info(f"Deleted {result.rowcount} users")
        return result.rowcount

    # =========================================================================
    # PRIVATE HELPER METHODS
    # =========================================================================

    async def _get_model(self, user_id: str) -> Optional[UserModel]:
        try:
            return await self._session.get(UserModel, user_id)

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {user_id}: {str(e)}")
            raise DatabaseError(
                f"Failed to retrieve user: {str(e)}", operation="find_by_id", table="users"
            ) from e

    def _model_to_domain(self, user_model: UserModel) -> User:
        """
        Convert SQLAlchemy model to domain entity.
        """
        return User(
            id=user_model.id,
            email=user_model.email,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            age=user_model.age,
            created_at=self._as_utc(user_model.created_at),
            updated_at=self._as_utc(user_model.updated_at),
        )

    @staticmethod
    def _as_utc(value: datetime) -> datetime:
        # SQLite hands back naive datetimes even for timezone-aware columns
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
