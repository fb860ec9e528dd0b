# 📄 File: app/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for managing users: add a user, list all users,
# look one up, change their details, and delete them.
#
# 🧪 Purpose (Technical Summary):
# FastAPI users endpoints. Each route validates its body with validate_user_payload, runs
# one handler, and maps UserManagementError kinds to HTTP status codes through the
# exhaustive status_for table.
#
# 🔗 Dependencies:
# - FastAPI router, status codes, Body
# - app.modules.user_management.application (commands, queries, handlers)
# - app.modules.user_management.presentation.api.schemas.user_schemas (request/response schemas)
# - app.modules.user_management.presentation.dependencies (handler factories)
#
# 🔄 Connected Modules / Calls From:
# - app.main (router inclusion under settings.API_PREFIX)

"""
Users API Endpoints

Endpoints:
- POST /users: Create a user (201)
- GET /users: List users, newest first (200)
- GET /users/{user_id}: Get one user (200, 404)
- PUT /users/{user_id}: Update a user (200, 400)
- DELETE /users/{user_id}: Delete a user (204, 404)

Create and update answer 400 for every use-case failure, including an
unknown id on update; reads and deletes answer 404 for an unknown id.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, NoReturn

from fastapi import APIRouter, Body, Depends, Response, status

from app.modules.user_management.application.commands.delete_user import DeleteUserCommand
from app.modules.user_management.application.handlers.command_handlers import (
    CreateUserCommandHandler,
    DeleteUserCommandHandler,
    UpdateUserCommandHandler,
)
from app.modules.user_management.application.handlers.query_handlers import (
    GetAllUsersQueryHandler,
    GetUserByIdQueryHandler,
)
from app.modules.user_management.application.queries.get_user import GetUserByIdQuery
from app.modules.user_management.application.queries.list_users import GetAllUsersQuery
from app.modules.user_management.presentation.api.schemas.user_schemas import (
    UserResponse,
    parse_create_payload,
    parse_update_payload,
    validate_user_payload,
)
from app.modules.user_management.presentation.dependencies import (
    get_all_users_handler,
    get_create_user_handler,
    get_delete_user_handler,
    get_update_user_handler,
    get_user_by_id_handler,
)
from app.shared.core.exceptions import (
    UserErrorKind,
    UserManagementError,
    UserServiceException,
    ValidationError,
)

logger = logging.getLogger(__name__)

users_router = APIRouter(prefix="/users", tags=["Users"])


# =========================================================================
# ERROR MAPPING
# =========================================================================

class UserOperation(str, Enum):
    CREATE = "create"
    GET_ALL = "get_all"
    GET_BY_ID = "get_by_id"
    UPDATE = "update"
    DELETE = "delete"


# Every (operation, kind) pair is listed; test_status_table_is_exhaustive guards this
_STATUS_TABLE: Dict[UserOperation, Dict[UserErrorKind, int]] = {
    UserOperation.CREATE: {
        UserErrorKind.DUPLICATE_EMAIL: status.HTTP_400_BAD_REQUEST,
        UserErrorKind.EMAIL_CONFLICT: status.HTTP_400_BAD_REQUEST,
        UserErrorKind.NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    },
    UserOperation.GET_ALL: {
        UserErrorKind.DUPLICATE_EMAIL: status.HTTP_500_INTERNAL_SERVER_ERROR,
        UserErrorKind.EMAIL_CONFLICT: status.HTTP_500_INTERNAL_SERVER_ERROR,
        UserErrorKind.NOT_FOUND: status.HTTP_500_INTERNAL_SERVER_ERROR,
    },
    UserOperation.GET_BY_ID: {
        UserErrorKind.DUPLICATE_EMAIL: status.HTTP_500_INTERNAL_SERVER_ERROR,
        UserErrorKind.EMAIL_CONFLICT: status.HTTP_500_INTERNAL_SERVER_ERROR,
        UserErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    },
    UserOperation.UPDATE: {
        UserErrorKind.DUPLICATE_EMAIL: status.HTTP_400_BAD_REQUEST,
        UserErrorKind.EMAIL_CONFLICT: status.HTTP_400_BAD_REQUEST,
        UserErrorKind.NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    },
    UserOperation.DELETE: {
        UserErrorKind.DUPLICATE_EMAIL: status.HTTP_500_INTERNAL_SERVER_ERROR,
        UserErrorKind.EMAIL_CONFLICT: status.HTTP_500_INTERNAL_SERVER_ERROR,
        UserErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    },
}


def status_for(operation: UserOperation, kind: UserErrorKind) -> int:
    """
    HTTP status for a use-case failure of ``kind`` raised by ``operation``.

    Kinds an operation can never raise map to 500.
    """
    return _STATUS_TABLE[operation][kind]


def _raise_for(operation: UserOperation, error: UserManagementError) -> NoReturn:
    status_code = status_for(operation, error.kind)
    logger.info(f"{operation.value} failed with {error.kind.value}, responding {status_code}")
    raise UserServiceException(
        message=error.message,
        status_code=status_code,
        details=error.details,
        error_code=error.error_code,
    ) from error


def _validate(payload: Dict[str, Any], partial: bool) -> None:
    errors = validate_user_payload(payload, partial=partial)
    if errors:
        raise ValidationError(
            message="Invalid user data",
            errors=[error.model_dump() for error in errors],
        )


# =========================================================================
# ENDPOINTS
# =========================================================================

@users_router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Invalid data or email already registered"},
    }
)
async def create_user(
    payload: Dict[str, Any] = Body(...),
    handler: CreateUserCommandHandler = Depends(get_create_user_handler),
) -> UserResponse:
    """
    Create a new user.

    Raises:
        ValidationError: For malformed or unknown fields (400)
        UserServiceException: For use-case failures (400)
    """
    _validate(payload, partial=False)
    command = parse_create_payload(payload).to_command()

    try:
        user = await handler.handle(command)
    except UserManagementError as e:
        _raise_for(UserOperation.CREATE, e)

    return UserResponse.from_entity(user)


@users_router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    description="All users ordered by creation time, newest first",
)
async def get_all_users(
    handler: GetAllUsersQueryHandler = Depends(get_all_users_handler),
) -> List[UserResponse]:
    users = await handler.handle(GetAllUsersQuery())
    return [UserResponse.from_entity(user) for user in users]


@users_router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
    responses={
        200: {"description": "User found"},
        404: {"description": "User not found"},
    }
)
async def get_user(
    user_id: str,
    handler: GetUserByIdQueryHandler = Depends(get_user_by_id_handler),
) -> UserResponse:
    try:
        user = await handler.handle(GetUserByIdQuery(user_id=user_id))
    except UserManagementError as e:
        _raise_for(UserOperation.GET_BY_ID, e)

    return UserResponse.from_entity(user)


@users_router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
    description="Partial update; omitted fields keep their current value",
    responses={
        200: {"description": "User updated successfully"},
        400: {"description": "Invalid data, unknown user or email in use"},
    }
)
async def update_user(
    user_id: str,
    payload: Dict[str, Any] = Body(...),
    handler: UpdateUserCommandHandler = Depends(get_update_user_handler),
) -> UserResponse:
    """
    Update an existing user.

    Raises:
        ValidationError: For malformed or unknown fields (400)
        UserServiceException: For use-case failures, including an unknown id (400)
    """
    _validate(payload, partial=True)
    command = parse_update_payload(payload).to_command(user_id)

    try:
        user = await handler.handle(command)
    except UserManagementError as e:
        _raise_for(UserOperation.UPDATE, e)

    return UserResponse.from_entity(user)


@users_router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete user",
    responses={
        204: {"description": "User deleted"},
        404: {"description": "User not found"},
    }
)
async def delete_user(
    user_id: str,
    handler: DeleteUserCommandHandler = Depends(get_delete_user_handler),
) -> Response:
    try:
        await handler.handle(DeleteUserCommand(user_id=user_id))
    except UserManagementError as e:
        _raise_for(UserOperation.DELETE, e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
