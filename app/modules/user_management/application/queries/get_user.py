# 📄 File: app/modules/user_management/application/queries/get_user.py
# 🧭 Purpose (Layman Explanation):
# This file defines the "get user" query, which names the single user account to look up.
#
# 🧪 Purpose (Technical Summary):
# CQRS read-side query for single-user retrieval by id.
#
# 🔗 Dependencies:
# - pydantic for query structure and immutability
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.application.handlers.query_handlers (GetUserByIdQueryHandler)
# - app.modules.user_management.presentation.api.v1.users (GET /users/{id})

from pydantic import BaseModel, ConfigDict, Field


class GetUserByIdQuery(BaseModel):
    """Query for retrieving one user by id."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., description="ID of the user to retrieve")
