# 📄 File: app/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the definitions of what a user looks like so other parts of the app can import them from one place
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the User entity and its create/update data records
# 🔗 Dependencies:
# user.py
# 🔄 Connected Modules / Calls From:
# Repositories, application handlers, infrastructure implementations

from .user import CreateUserData, UpdateUserData, User

__all__ = [
    "User",
    "CreateUserData",
    "UpdateUserData",
]
