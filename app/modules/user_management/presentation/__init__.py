# 📄 File: app/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the part of user management that talks to the outside world over HTTP.
# 🧪 Purpose (Technical Summary):
# Presentation layer initialization providing the FastAPI users router, request/response
# schemas and the dependency providers that wire handlers to repositories.
# 🔗 Dependencies:
# FastAPI, pydantic, application handlers
# 🔄 Connected Modules / Calls From:
# app.main, tests

"""
User Management Presentation Layer

Presentation Components:
- API Routers: RESTful endpoints for user operations
- Pydantic Schemas: Request validation and response serialization
- Dependencies: Request-scoped repository and handler construction
"""

from .api.v1.users import users_router
from .dependencies import get_user_repository

__all__ = [
    "users_router",
    "get_user_repository",
]
