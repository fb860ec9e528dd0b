# 📄 File: app/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is in our service - their email, name and age plus when the
# record was created and last changed - and the shapes of data used to create or change one.
# 🧪 Purpose (Technical Summary):
# Immutable domain entity for User and the CreateUserData / UpdateUserData records passed
# across the repository port. Format validation lives at the API boundary, not here.
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# user_repository.py, command/query handlers, repository implementations, API schemas

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """
    User domain entity.

    A single-state, immutable snapshot of one persisted user:
    - id (str): Opaque identifier assigned by the storage layer, never reassigned
    - email (str): Unique across all live users, compared as an exact string
    - first_name / last_name (str): Stored verbatim, no normalization
    - age (int): Non-negative
    - created_at / updated_at (datetime): Set by the storage layer; updated_at
      advances on every successful update

    Changing a user means asking the repository for a new snapshot; the
    instance itself cannot be mutated.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    first_name: str
    last_name: str
    age: int
    created_at: datetime
    updated_at: datetime


class CreateUserData(BaseModel):
    """Everything needed to persist a new user. All fields required."""

    model_config = ConfigDict(frozen=True)

    email: str
    first_name: str
    last_name: str
    age: int


class UpdateUserData(BaseModel):
    """
    Partial change set for an existing user.

    A field left as None means "leave unchanged"; an instance with every
    field None is a legal, empty update.
    """

    model_config = ConfigDict(frozen=True)

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None

    def changes(self) -> Dict[str, Any]:
        """Return only the fields that were supplied."""
        return self.model_dump(exclude_none=True)
