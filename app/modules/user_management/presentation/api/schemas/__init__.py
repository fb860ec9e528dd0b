# 📄 File: app/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the data validation schemas for our users API, making sure incoming
# requests and outgoing responses have the correct format.
#
# 🧪 Purpose (Technical Summary):
# API schemas package initialization providing Pydantic request/response models and the
# payload validation function for the users endpoints.
#
# 🔗 Dependencies:
# - pydantic models for request/response validation
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1 (API endpoints use schemas)

from .user_schemas import (
    CreateUserRequest,
    FieldError,
    UpdateUserRequest,
    UserResponse,
    parse_create_payload,
    parse_update_payload,
    validate_user_payload,
)

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
    "FieldError",
    "validate_user_payload",
    "parse_create_payload",
    "parse_update_payload",
]
