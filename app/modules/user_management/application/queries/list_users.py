# 📄 File: app/modules/user_management/application/queries/list_users.py
# 🧭 Purpose (Layman Explanation):
# This file defines the "list users" query used to fetch every user, newest first.
#
# 🧪 Purpose (Technical Summary):
# CQRS read-side query for the full user listing. Carries no parameters; pagination and
# filtering are out of scope for this service.
#
# 🔗 Dependencies:
# - pydantic for query structure
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.application.handlers.query_handlers (GetAllUsersQueryHandler)
# - app.modules.user_management.presentation.api.v1.users (GET /users)

from pydantic import BaseModel, ConfigDict


class GetAllUsersQuery(BaseModel):
    """Query for listing all users ordered by creation time, newest first."""

    model_config = ConfigDict(frozen=True)
