# 📄 File: app/modules/user_management/application/commands/delete_user.py
# 🧭 Purpose (Layman Explanation):
# This file defines the "delete user" command, which names the user account to remove for good.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for hard user deletion. Deleted ids are never reused and later lookups
# of the same id report not found.
#
# 🔗 Dependencies:
# - pydantic for command structure and immutability
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.application.handlers.command_handlers (DeleteUserCommandHandler)
# - app.modules.user_management.presentation.api.v1.users (DELETE /users/{id})

from pydantic import BaseModel, ConfigDict, Field


class DeleteUserCommand(BaseModel):
    """Command for permanently deleting a user."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., description="ID of the user to delete")
