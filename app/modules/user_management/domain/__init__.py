# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation): 
# Organizes the core business definitions for user accounts - what a user is and how user data is stored and looked up
# 🧪 Purpose (Technical Summary): 
# Domain layer initialization containing the User entity, its create/update data records and the repository port
# 🔗 Dependencies: 
# Domain models and repositories from subpackages
# 🔄 Connected Modules / Calls From: 
# Application layer, Infrastructure layer, Presentation layer

"""
User Management Domain Layer

Domain Models:
- User: Immutable user entity
- CreateUserData / UpdateUserData: Inputs to the repository port

Repository Interfaces:
- UserRepository: User data access interface

Business Rules Enforced:
- Email uniqueness across live users
- Immutable user ids
- updated_at advances on every successful update
"""

from .models.user import CreateUserData, UpdateUserData, User
from .repositories.user_repository import UserRepository

__all__ = [
    # Domain Models
    "User",
    "CreateUserData",
    "UpdateUserData",

    # Repository Interfaces
    "UserRepository",
]
