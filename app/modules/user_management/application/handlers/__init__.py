# 📄 File: app/modules/user_management/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes all the "action processors" for user management, which take commands
# and queries and actually execute them against the user store.
#
# 🧪 Purpose (Technical Summary):
# Handlers package initialization implementing the CQRS handler pattern for user management
# operations. Every handler takes a UserRepository through its constructor.
#
# 🔗 Dependencies:
# - app.modules.user_management.application.commands (command definitions)
# - app.modules.user_management.application.queries (query definitions)
# - app.modules.user_management.domain.repositories (repository interface)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (handler factories)

"""
User Management Handlers

Command Handlers:
- CreateUserCommandHandler: User creation with email uniqueness check
- UpdateUserCommandHandler: Partial update with email conflict check
- DeleteUserCommandHandler: Hard delete

Query Handlers:
- GetAllUsersQueryHandler: List all users, newest first
- GetUserByIdQueryHandler: Single user retrieval
"""

from .command_handlers import (
    CreateUserCommandHandler,
    DeleteUserCommandHandler,
    UpdateUserCommandHandler,
)
from .query_handlers import GetAllUsersQueryHandler, GetUserByIdQueryHandler

__all__ = [
    # Command Handlers
    "CreateUserCommandHandler",
    "UpdateUserCommandHandler",
    "DeleteUserCommandHandler",

    # Query Handlers
    "GetAllUsersQueryHandler",
    "GetUserByIdQueryHandler",
]
