# 📄 File: app/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file sets up the infrastructure layer for user management, which handles how our app
# actually stores and retrieves user data, either in the database or in memory.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer initialization providing the concrete UserRepository implementations.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories (repository interfaces)
# - app.shared.infrastructure.database (database connection)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation (dependency injection)
# - tests

"""
User Management Infrastructure Layer

Infrastructure Components:
- Database: SQLAlchemy model and repository implementation
- Memory: Dict-backed repository for tests and local runs
"""

from .database import UserModel, UserRepositoryImpl
from .memory import InMemoryUserRepository

__all__ = [
    "UserModel",
    "UserRepositoryImpl",
    "InMemoryUserRepository",
]
