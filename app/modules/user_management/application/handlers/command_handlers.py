# 📄 File: app/modules/user_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file contains the "action processors" that carry out user changes - adding a new user,
# changing an existing user's details, and removing a user - while making sure no two users
# end up sharing the same email address.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers for user management write operations. Each handler receives its
# UserRepository through the constructor, runs its reads and writes strictly in sequence,
# and raises UserManagementError subclasses as terminal failures.
#
# 🔗 Dependencies:
# - app.modules.user_management.application.commands (command definitions)
# - app.modules.user_management.domain.repositories (repository interface)
# - app.shared.core.exceptions (user error kinds)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (handler factories)
# - app.modules.user_management.presentation.api.v1.users (API endpoints invoke handlers)
# - scripts/seed_users.py

__all__ = [
    "CreateUserCommandHandler",
    "UpdateUserCommandHandler",
    "DeleteUserCommandHandler",
]

import logging

from app.modules.user_management.application.commands.create_user import CreateUserCommand
from app.modules.user_management.application.commands.delete_user import DeleteUserCommand
from app.modules.user_management.application.commands.update_user import UpdateUserCommand
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import (
    DuplicateEmailError,
    EmailConflictError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


class CreateUserCommandHandler:
    """
    Handles user creation: email uniqueness check followed by a single insert.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def handle(self, command: CreateUserCommand) -> User:
        """
        Create a new user.

        Args:
            command: Validated creation data

        Returns:
            The persisted User entity

        Raises:
            DuplicateEmailError: If another user already has the email
        """
        logger.info(f"Starting user creation process for email: {command.email}")

        existing_user = await self._user_repository.find_by_email(command.email)
        if existing_user is not None:
            logger.warning(f"User creation rejected, email already registered: {command.email}")
            raise DuplicateEmailError(command.email)

        user = await self._user_repository.create(command.to_create_data())
        logger.info(f"User created successfully: {user.id}")
        return user


class UpdateUserCommandHandler:
    """
    Handles partial user updates.

    The email lookup is skipped entirely when the supplied email equals the
    current one.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def handle(self, command: UpdateUserCommand) -> User:
        """
        Apply the supplied changes to an existing user.

        Args:
            command: Target user id plus the fields to change

        Returns:
            The updated User entity

        Raises:
            UserNotFoundError: If the user does not exist
            EmailConflictError: If the new email belongs to a different user
        """
        logger.info(f"Updating user: {command.user_id}")

        current_user = await self._user_repository.find_by_id(command.user_id)
        if current_user is None:
            raise UserNotFoundError(command.user_id)

        if command.email is not None and command.email != current_user.email:
            holder = await self._user_repository.find_by_email(command.email)
            if holder is not None and holder.id != current_user.id:
                logger.warning(
                    f"Email change rejected for user {command.user_id}: {command.email} already in use"
                )
                raise EmailConflictError(command.user_id, command.email)

        updated_user = await self._user_repository.update(
            command.user_id, command.to_update_data()
        )
        logger.info(f"User updated successfully: {updated_user.id}")
        return updated_user


class DeleteUserCommandHandler:
    """Handles permanent user deletion."""

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def handle(self, command: DeleteUserCommand) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        existing_user = await self._user_repository.find_by_id(command.user_id)
        if existing_user is None:
            raise UserNotFoundError(command.user_id)

        await self._user_repository.delete(command.user_id)
        logger.info(f"User deleted: {command.user_id}")
