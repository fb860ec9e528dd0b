# 📄 File: app/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the data formats the users API accepts and returns, and checks incoming
# user details (valid email, non-empty names, sensible age) before anything is saved.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the users endpoints. Request models forbid unknown
# fields and accept camelCase (wire form) or snake_case keys. validate_user_payload turns
# pydantic validation failures into a flat list of FieldError records.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization (email-validator for addresses)
# - app.modules.user_management.domain.models.user (User entity)
# - app.modules.user_management.application.commands (command construction)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.users (user endpoints)
# - FastAPI response serialization and OpenAPI documentation

"""
User Management API Schemas

Request Schemas:
- CreateUserRequest: All four fields required
- UpdateUserRequest: Same rules, every field optional

Response Schemas:
- UserResponse: camelCase user representation with ISO-8601 timestamps
- FieldError: One validation failure (field, message, type)

Validation Rules:
- email: bare, syntactically valid address, kept exactly as sent
- firstName / lastName: non-empty strings of at most 100 characters
- age: integer between 0 and 2**31 - 1 (numeric strings and floats are rejected)
- any other key is rejected
"""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional, Type

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    validate_email,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.modules.user_management.application.commands.create_user import CreateUserCommand
from app.modules.user_management.application.commands.update_user import UpdateUserCommand
from app.modules.user_management.domain.models.user import User


# Widest values the users table columns hold
MAX_NAME_LENGTH = 100
MAX_AGE = 2_147_483_647


def _check_email(value: str) -> str:
    # validate_email also parses "Name <addr>" and trims whitespace; only a bare address is accepted
    if value != value.strip() or "<" in value or ">" in value:
        raise ValueError("value is not a valid email address: expected a bare address")
    # the normalized address it returns is discarded; the original string is what gets stored
    validate_email(value)
    return value


EmailAddress = Annotated[StrictStr, AfterValidator(_check_email)]
NameField = Annotated[StrictStr, Field(min_length=1, max_length=MAX_NAME_LENGTH)]
AgeField = Annotated[StrictInt, Field(ge=0, le=MAX_AGE)]


_request_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
    frozen=True,
)


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class CreateUserRequest(BaseModel):
    """
    Request body for POST /users.
    """
    model_config = ConfigDict(
        **_request_config,
        json_schema_extra={
            "example": {
                "email": "john.doe@example.com",
                "firstName": "John",
                "lastName": "Doe",
                "age": 30,
            }
        },
    )

    email: EmailAddress
    first_name: NameField
    last_name: NameField
    age: AgeField

    def to_command(self) -> CreateUserCommand:
        return CreateUserCommand(
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
        )


class UpdateUserRequest(BaseModel):
    """
    Request body for PUT /users/{id}. Omitted fields stay unchanged.
    """
    model_config = ConfigDict(
        **_request_config,
        json_schema_extra={
            "example": {
                "firstName": "Jonathan",
                "age": 31,
            }
        },
    )

    email: Optional[EmailAddress] = None
    first_name: Optional[NameField] = None
    last_name: Optional[NameField] = None
    age: Optional[AgeField] = None

    def to_command(self, user_id: str) -> UpdateUserCommand:
        return UpdateUserCommand(
            user_id=user_id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
        )


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class UserResponse(BaseModel):
    """
    User representation returned by every users endpoint.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "email": "john.doe@example.com",
                "firstName": "John",
                "lastName": "Doe",
                "age": 30,
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        },
    )

    id: str
    email: str
    first_name: str
    last_name: str
    age: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Build the response from a domain User."""
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            age=user.age,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class FieldError(BaseModel):
    """A single input validation failure."""
    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Offending field as sent by the client")
    message: str = Field(..., description="Human readable reason")
    type: str = Field(..., description="Machine readable error type")


# =============================================================================
# VALIDATION
# =============================================================================

def _request_model(partial: bool) -> Type[BaseModel]:
    return UpdateUserRequest if partial else CreateUserRequest


def _to_field_errors(error: PydanticValidationError) -> List[FieldError]:
    field_errors = []
    for item in error.errors():
        loc = item.get("loc") or ()
        field = ".".join(str(part) for part in loc) or "body"
        field_errors.append(
            FieldError(field=field, message=item.get("msg", "Invalid value"), type=item.get("type", "value_error"))
        )
    return field_errors


def validate_user_payload(payload: Dict[str, Any], partial: bool = False) -> List[FieldError]:
    """
    Validate a create (partial=False) or update (partial=True) body.

    Args:
        payload: Decoded JSON request body
        partial: When True every field is optional

    Returns:
        List[FieldError]: Empty when the payload is acceptable
    """
    try:
        _request_model(partial).model_validate(payload)
    except PydanticValidationError as e:
        return _to_field_errors(e)
    return []


def parse_create_payload(payload: Dict[str, Any]) -> CreateUserRequest:
    """Parse a payload already accepted by validate_user_payload."""
    return CreateUserRequest.model_validate(payload)


def parse_update_payload(payload: Dict[str, Any]) -> UpdateUserRequest:
    """Parse a payload already accepted by validate_user_payload(partial=True)."""
    return UpdateUserRequest.model_validate(payload)
