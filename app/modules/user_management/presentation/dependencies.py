# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation): 
# This file hands each users API request the tools it needs - a connection to the user store
# and the right "action processor" - fresh for every request.
# 🧪 Purpose (Technical Summary): 
# FastAPI dependency providers that build a request-scoped UserRepository on top of the
# request's database session and construct each handler with it explicitly.
# 🔗 Dependencies: 
# FastAPI, SQLAlchemy AsyncSession, app.shared.infrastructure.database.session,
# app.modules.user_management.application.handlers.*, UserRepositoryImpl
# 🔄 Connected Modules / Calls From: 
# app.modules.user_management.presentation.api.v1.users, tests (dependency_overrides)

"""
User Management Module Dependencies

Override get_user_repository (app.dependency_overrides) to run the API
against another UserRepository, e.g. InMemoryUserRepository in tests.
"""

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.application.handlers.command_handlers import (
    CreateUserCommandHandler,
    DeleteUserCommandHandler,
    UpdateUserCommandHandler,
)
from app.modules.user_management.application.handlers.query_handlers import (
    GetAllUsersQueryHandler,
    GetUserByIdQueryHandler,
)
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)


# =========================================================================
# REPOSITORY
# =========================================================================

def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> UserRepository:
    """Request-scoped SQLAlchemy user repository."""
    return UserRepositoryImpl(session)


# =========================================================================
# HANDLER FACTORIES
# =========================================================================

def get_create_user_handler(
    user_repository: UserRepository = Depends(get_user_repository),
) -> CreateUserCommandHandler:
    return CreateUserCommandHandler(user_repository)


def get_all_users_handler(
    user_repository: UserRepository = Depends(get_user_repository),
) -> GetAllUsersQueryHandler:
    return GetAllUsersQueryHandler(user_repository)


def get_user_by_id_handler(
    user_repository: UserRepository = Depends(get_user_repository),
) -> GetUserByIdQueryHandler:
    return GetUserByIdQueryHandler(user_repository)


def get_update_user_handler(
    user_repository: UserRepository = Depends(get_user_repository),
) -> UpdateUserCommandHandler:
    return UpdateUserCommandHandler(user_repository)


def get_delete_user_handler(
    user_repository: UserRepository = Depends(get_user_repository),
) -> DeleteUserCommandHandler:
    return DeleteUserCommandHandler(user_repository)
