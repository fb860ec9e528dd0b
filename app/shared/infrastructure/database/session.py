# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) ensuring each request
# gets its own clean session and that its changes are either all saved or all undone.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy session management with a FastAPI dependency,
# commit-on-success / rollback-on-failure transaction handling, usable from
# scripts that bring their own engine.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - app/modules/user_management/presentation/dependencies.py (request sessions)
# - scripts/seed_users.py (own engine)
# - app/main.py (startup)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.shared.core.exceptions import DatabaseError
from app.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None
        self._initialized = False

    async def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """
        Initialize the session factory.

        Binds to the global database engine unless an engine is given.
        """
        if engine is None:
            engine = await get_database_engine()

        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=True,
        )

        self._initialized = True
        logger.info("Database session factory initialized successfully")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Commits when the block exits normally. On any exception the
        transaction is rolled back and the exception propagates; only raw
        SQLAlchemy errors are wrapped, as DatabaseError.
        """
        if not self._initialized or self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            logger.debug("Database session created")
            yield session

            await session.commit()
            logger.debug("Database transaction committed successfully")

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}") from e

        except Exception:
            await session.rollback()
            logger.debug("Transaction rolled back")
            raise

        finally:
            await session.close()
            logger.debug("Database session closed")


# Global session manager instance
session_manager = DatabaseSessionManager()


async def initialize_sessions() -> None:
    """Initialize the global database session manager."""
    await session_manager.initialize()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Usage:
        @router.post("/users")
        async def create_user(
            payload: Dict[str, Any],
            db: AsyncSession = Depends(get_db_session)
        ):
            ...

    Yields:
        AsyncSession: Database session bound to the request's transaction
    """
    async with session_manager.get_session() as session:
        yield session

