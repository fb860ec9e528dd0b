# 📄 File: app/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the users web API, its versions and its request/response formats
# 🧪 Purpose (Technical Summary):
# API package initialization for user management, re-exporting the versioned routers
# 🔗 Dependencies:
# v1 routers, schemas
# 🔄 Connected Modules / Calls From:
# app.main (router inclusion)

from .v1 import users_router

__all__ = [
    "users_router",
]
