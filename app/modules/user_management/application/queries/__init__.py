# 📄 File: app/modules/user_management/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups together the "questions" we can ask about users - one user by id, or all users
# 🧪 Purpose (Technical Summary):
# Package initialization for CQRS read-side queries of the user management module
# 🔗 Dependencies:
# get_user.py, list_users.py
# 🔄 Connected Modules / Calls From:
# Query handlers, API endpoints

from .get_user import GetUserByIdQuery
from .list_users import GetAllUsersQuery

__all__ = [
    "GetUserByIdQuery",
    "GetAllUsersQuery",
]
