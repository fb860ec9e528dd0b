"""
Core utilities package for the user service.
Provides the shared exception hierarchy and user error kinds.
"""

from .exceptions import (
    UserServiceException,
    ValidationError,
    NotFoundError,
    DuplicateResourceError,
    ConflictError,
    DatabaseError,
    RepositoryError,
    UserErrorKind,
    UserManagementError,
    DuplicateEmailError,
    EmailConflictError,
    UserNotFoundError,
)

__all__ = [
    # Exceptions
    "UserServiceException",
    "ValidationError",
    "NotFoundError",
    "DuplicateResourceError",
    "ConflictError",
    "DatabaseError",
    "RepositoryError",

    # User error kinds
    "UserErrorKind",
    "UserManagementError",
    "DuplicateEmailError",
    "EmailConflictError",
    "UserNotFoundError",
]
