# 📄 File: app/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the database-related components for user management, making it easy
# to access user data storage functionality and the users table definition.
#
# 🧪 Purpose (Technical Summary):
# Database layer organization for user management, providing access to the SQLAlchemy model
# and the repository implementation for user data persistence.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM models and sessions
# - app.modules.user_management.domain.repositories (interface definitions)
# - app.shared.infrastructure.database (shared database utilities)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (repository wiring)
# - Database migration scripts (imports models for schema generation)

"""
User Management Database Layer

Database Components:
- Models: UserModel for the users table
- Repositories: UserRepositoryImpl, the SQLAlchemy UserRepository
"""

from .models import UserModel
from .user_repository_impl import UserRepositoryImpl

__all__ = [
    "UserModel",
    "UserRepositoryImpl",
]
