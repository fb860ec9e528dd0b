# 📄 File: app/modules/user_management/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups together all the "action requests" that change user data - creating, updating and deleting users
# 🧪 Purpose (Technical Summary):
# Package initialization for CQRS write-side commands of the user management module
# 🔗 Dependencies:
# create_user.py, update_user.py, delete_user.py
# 🔄 Connected Modules / Calls From:
# Command handlers, API endpoints

from .create_user import CreateUserCommand
from .delete_user import DeleteUserCommand
from .update_user import UpdateUserCommand

__all__ = [
    "CreateUserCommand",
    "UpdateUserCommand",
    "DeleteUserCommand",
]
