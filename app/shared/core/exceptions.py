# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the user service uses to communicate
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# Also holds the closed set of user error kinds raised by the use-case layer.
# 🔗 Dependencies:
# FastAPI status constants, typing, enum
# 🔄 Connected Modules / Calls From:
# Use-case handlers, repository implementations, API endpoints, app.main exception handlers

from enum import Enum
from typing import Any, Dict, List, Optional

from fastapi import status


class UserServiceException(Exception):
    """
    Base exception class for the user service.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# REQUEST EXCEPTIONS
# =============================================================================

class ValidationError(UserServiceException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[List[Dict[str, Any]]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if errors is not None:
            details["errors"] = errors

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(UserServiceException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class DuplicateResourceError(UserServiceException):
    """
    Exception raised when attempting to create duplicate resources.
    Used for unique constraint violations, duplicate entries, etc.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field
        if value:
            details["value"] = value

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_RESOURCE"
        )


class ConflictError(UserServiceException):
    """
    Exception raised for resource conflicts.
    Used when an update would collide with another existing resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: Optional[str] = None,
        conflict_field: Optional[str] = None,
        existing_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if conflict_field:
            details["conflict_field"] = conflict_field
        if existing_value is not None:
            details["existing_value"] = str(existing_value)

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="CONFLICT_ERROR"
        )


# =============================================================================
# INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(UserServiceException):
    """
    Exception raised for database operation failures.
    Used for connection issues, query failures, etc.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(UserServiceException):
    """
    Exception raised for repository/database operation failures.
    Used when database operations fail at the repository layer.
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity:
            details["entity"] = entity
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


# =============================================================================
# USER MANAGEMENT EXCEPTIONS
# =============================================================================

class UserErrorKind(str, Enum):
    """Closed set of failures the user use-cases can raise."""
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    EMAIL_CONFLICT = "EMAIL_CONFLICT"
    NOT_FOUND = "NOT_FOUND"


class UserManagementError(Exception):
    """
    Marker base for the user error kinds.

    Every subclass sets ``kind``; the presentation layer matches on it
    and never on the message text.
    """
    kind: UserErrorKind


class DuplicateEmailError(UserManagementError, DuplicateResourceError):
    """Create was called with an email that already belongs to a live user."""
    kind = UserErrorKind.DUPLICATE_EMAIL

    def __init__(self, email: str):
        self.email = email
        super().__init__(
            message="User with this email already exists",
            resource_type="user",
            field="email",
            value=email,
        )
        self.error_code = self.kind.value


class EmailConflictError(UserManagementError, ConflictError):
    """Update tried to move a user onto an email held by a different user."""
    kind = UserErrorKind.EMAIL_CONFLICT

    def __init__(self, user_id: str, email: str):
        self.user_id = user_id
        self.email = email
        super().__init__(
            message="Email already in use",
            resource_type="user",
            conflict_field="email",
            existing_value=email,
            details={"user_id": user_id},
        )
        self.error_code = self.kind.value


class UserNotFoundError(UserManagementError, NotFoundError):
    """No live user carries the requested id."""
    kind = UserErrorKind.NOT_FOUND

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(
            message="User not found",
            resource_type="user",
            resource_id=user_id,
        )
        self.error_code = self.kind.value
