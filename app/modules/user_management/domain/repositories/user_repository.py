# 📄 File: app/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update, and delete user information without
# specifying the actual database technology
# 🧪 Purpose (Technical Summary):
# Repository port for User entities following the Repository pattern and the dependency
# inversion principle. Implemented by the SQLAlchemy adapter and the in-memory test double.
# 🔗 Dependencies:
# Domain models (User, CreateUserData, UpdateUserData), typing, abc
# 🔄 Connected Modules / Calls From:
# Application handlers, infrastructure implementations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.user import CreateUserData, UpdateUserData, User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Methods return domain entities (User), not database models
    - All operations are async for non-blocking I/O
    - The backing store must enforce email uniqueness itself; the
      use-case check in front of it is not atomic across requests
    """

    @abstractmethod
    async def create(self, data: CreateUserData) -> User:
        """
        Persist a new user.

        Args:
            data: Fields for the new user

        Returns:
            Created User entity with id and timestamps assigned

        Raises:
            DuplicateEmailError: If the store rejects the email as taken
        """

    @abstractmethod
    async def find_all(self) -> List[User]:
        """
        List every live user, most recently created first.
        """

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Get user by exact email address.

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def update(self, user_id: str, data: UpdateUserData) -> User:
        """
        Apply a partial update and advance updated_at.

        Args:
            user_id: ID of the user to change
            data: Fields to change; None fields are left as they are

        Returns:
            Updated User entity

        Raises:
            UserNotFoundError: If user_id does not exist
            EmailConflictError: If the store rejects the new email as taken
        """

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """
        Hard delete user by ID.

        Raises:
            UserNotFoundError: If user_id does not exist
        """
