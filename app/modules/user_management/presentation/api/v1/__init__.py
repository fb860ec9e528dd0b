# 📄 File: app/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the users web API
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the v1 users router
# 🔗 Dependencies:
# users.py
# 🔄 Connected Modules / Calls From:
# app.main (router inclusion)

"""
User Management API Version 1

Endpoints:
- Users API (/users): User CRUD operations
"""

from .users import users_router

__all__ = [
    "users_router",
]
