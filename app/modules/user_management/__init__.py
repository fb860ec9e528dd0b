# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the user management feature area of the service: everything about adding, finding,
# changing and removing users lives under this folder.
# 🧪 Purpose (Technical Summary):
# Module package for user management organised as Domain / Application / Infrastructure /
# Presentation layers. Kept import-free so submodules can be loaded independently.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# app.main, migrations/env.py, scripts/seed_users.py

"""
User Management Module

Architecture follows Domain-Driven Design:
- Domain: User entity and the repository port
- Application: Commands, queries and handlers for the five use-cases
- Infrastructure: SQLAlchemy and in-memory repositories
- Presentation: API endpoints and request/response schemas
"""

__version__ = "1.0.0"
__module_name__ = "user_management"
__description__ = "User CRUD Module"
