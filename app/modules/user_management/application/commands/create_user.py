# 📄 File: app/modules/user_management/application/commands/create_user.py
# 🧭 Purpose (Layman Explanation):
# This file defines the "create user" command that carries everything needed to add a new
# person to the service: their email, first and last name, and age.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for user creation. Field formats are checked at the API boundary before the
# command is built; the command itself only converts to the repository's CreateUserData.
#
# 🔗 Dependencies:
# - pydantic for command structure and immutability
# - app.modules.user_management.domain.models.user (CreateUserData)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.application.handlers.command_handlers (CreateUserCommandHandler)
# - app.modules.user_management.presentation.api.v1.users (POST /users)
# - scripts/seed_users.py (fixture users)

"""
Create User Command

Command Fields:
- email: Email address, must not belong to another user
- first_name: Given name
- last_name: Family name
- age: Non-negative integer age
"""

from pydantic import BaseModel, ConfigDict, Field

from app.modules.user_management.domain.models.user import CreateUserData


class CreateUserCommand(BaseModel):
    """
    Command for creating a new user.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "email": "john.doe@example.com",
                "first_name": "John",
                "last_name": "Doe",
                "age": 30,
            }
        },
    )

    email: str = Field(..., description="User email address")
    first_name: str = Field(..., description="User first name")
    last_name: str = Field(..., description="User last name")
    age: int = Field(..., description="User age in years")

    def to_create_data(self) -> CreateUserData:
        """Convert command to the repository input record."""
        return CreateUserData(
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
        )
