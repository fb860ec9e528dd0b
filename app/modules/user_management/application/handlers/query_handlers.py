# 📄 File: app/modules/user_management/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file contains the "information retrievers" that look up one user by id or list
# every user, newest first.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers for user management read operations. Read-only and idempotent
# in the absence of intervening writes.
#
# 🔗 Dependencies:
# - app.modules.user_management.application.queries (query definitions)
# - app.modules.user_management.domain.repositories (repository interface)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (handler factories)
# - app.modules.user_management.presentation.api.v1.users (API endpoints invoke handlers)

"""
User Management Query Handlers

Query Handlers:
- GetAllUsersQueryHandler: All users, ordered by creation time descending
- GetUserByIdQueryHandler: Single user lookup, NOT_FOUND when absent
"""

import logging
from typing import List

from app.modules.user_management.application.queries.get_user import GetUserByIdQuery
from app.modules.user_management.application.queries.list_users import GetAllUsersQuery
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class GetAllUsersQueryHandler:
    """Handler returning the repository's listing unchanged."""

    def __init__(self, user_repository: UserRepository):
        """
        Initialize the list users query handler.

        Args:
            user_repository: Repository for user data access
        """
        self.user_repository = user_repository

    async def handle(self, query: GetAllUsersQuery) -> List[User]:
        users = await self.user_repository.find_all()
        logger.debug(f"Retrieved {len(users)} users")
        return users


class GetUserByIdQueryHandler:
    """Handler for single-user retrieval by id."""

    def __init__(self, user_repository: UserRepository):
        """
        Initialize the get user query handler.

        Args:
            user_repository: Repository for user data access
        """
        self.user_repository = user_repository

    async def handle(self, query: GetUserByIdQuery) -> User:
        """
        Retrieve a user.

        Args:
            query: Query carrying the user id

        Returns:
            The matching User entity

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = await self.user_repository.find_by_id(query.user_id)
        if user is None:
            logger.debug(f"User not found: {query.user_id}")
            raise UserNotFoundError(query.user_id)
        return user
