# 📄 File: app/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation): 
# Organizes the data access interface that defines how to save, find, and manage user information
# 🧪 Purpose (Technical Summary): 
# Package initialization for the repository port following the Repository pattern for data access abstraction
# 🔗 Dependencies: 
# user_repository.py
# 🔄 Connected Modules / Calls From: 
# Infrastructure implementations, application layer

"""
User Management Domain Repositories

Repository Interfaces:
- UserRepository: Data access interface for User entities

Implementation Note:
- This is an abstract class only
- Concrete implementations are in the infrastructure layer
"""

from .user_repository import UserRepository

__all__ = [
    "UserRepository",
]
