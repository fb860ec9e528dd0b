# 📄 File: app/modules/user_management/application/commands/update_user.py
# 🧭 Purpose (Layman Explanation):
# This file defines the "update user" command: which user to change and the new values for
# whichever details (email, names, age) the caller wants changed.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for partial user updates. Omitted fields stay None and are left untouched by
# the repository; an all-None command is a valid "touch" that only advances updated_at.
#
# 🔗 Dependencies:
# - pydantic for command structure and immutability
# - app.modules.user_management.domain.models.user (UpdateUserData)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.application.handlers.command_handlers (UpdateUserCommandHandler)
# - app.modules.user_management.presentation.api.v1.users (PUT /users/{id})

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.user_management.domain.models.user import UpdateUserData


class UpdateUserCommand(BaseModel):
    """
    Command for updating an existing user.

    Only fields that are not None are applied.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "user_id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "first_name": "Jonathan",
                "age": 31,
            }
        },
    )

    user_id: str = Field(..., description="ID of the user to update")
    email: Optional[str] = Field(default=None, description="New email address")
    first_name: Optional[str] = Field(default=None, description="New first name")
    last_name: Optional[str] = Field(default=None, description="New last name")
    age: Optional[int] = Field(default=None, description="New age in years")

    def to_update_data(self) -> UpdateUserData:
        """Convert command to the repository change set."""
        return UpdateUserData(
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
        )
