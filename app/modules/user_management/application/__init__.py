# 📄 File: app/modules/user_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the application layer for user management, which contains the
# commands (like "create user") and queries (like "get user") that our service runs.
#
# 🧪 Purpose (Technical Summary):
# Application layer initialization implementing the CQRS pattern with commands, queries
# and handlers for the five user use-cases.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain (entity and repository port)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation (API endpoints use application handlers)
# - scripts/seed_users.py

"""
User Management Application Layer

Application Components:
- Commands: User creation, updates and deletion
- Queries: Single user and full listing retrieval
- Handlers: Command and query execution logic
"""

from .commands import CreateUserCommand, DeleteUserCommand, UpdateUserCommand
from .handlers import (
    CreateUserCommandHandler,
    DeleteUserCommandHandler,
    GetAllUsersQueryHandler,
    GetUserByIdQueryHandler,
    UpdateUserCommandHandler,
)
from .queries import GetAllUsersQuery, GetUserByIdQuery

__all__ = [
    "CreateUserCommand",
    "UpdateUserCommand",
    "DeleteUserCommand",
    "GetAllUsersQuery",
    "GetUserByIdQuery",
    "CreateUserCommandHandler",
    "UpdateUserCommandHandler",
    "DeleteUserCommandHandler",
    "GetAllUsersQueryHandler",
    "GetUserByIdQueryHandler",
]
