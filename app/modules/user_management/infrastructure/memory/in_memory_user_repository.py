# 📄 File: app/modules/user_management/infrastructure/memory/in_memory_user_repository.py
# 🧭 Purpose (Layman Explanation):
# Keeps users in the program's memory instead of a database, so tests and local experiments
# can run the whole service without PostgreSQL.
#
# 🧪 Purpose (Technical Summary):
# Dict-backed implementation of UserRepository with the same observable contract as the
# SQLAlchemy adapter: exact-string email uniqueness, created_at DESC ordering, UUID4 ids and
# strictly advancing updated_at.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain (entity, data records, repository interface)
# - app.shared.core.exceptions (user error kinds)
#
# 🔄 Connected Modules / Calls From:
# - tests (API dependency override, handler tests)

import logging
from datetime import datetime, timedelta, timezone
from itertools import count
from threading import Lock
from typing import Dict, List, Optional
from uuid import uuid4

from app.modules.user_management.domain.models.user import CreateUserData, UpdateUserData, User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import DuplicateEmailError, EmailConflictError, UserNotFoundError

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    Thread-safe in-memory user repository.

    Ordering matches the SQL adapter (created_at DESC); users created within
    the same clock tick fall back to insertion order, newest first.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[str, User] = {}
        self._sequence: Dict[str, int] = {}
        self._counter = count()

    async def create(self, data: CreateUserData) -> User:
        with self._lock:
            if self._email_owner(data.email) is not None:
                raise DuplicateEmailError(data.email)

            now = datetime.now(timezone.utc)
            user = User(
                id=str(uuid4()),
                email=data.email,
                first_name=data.first_name,
                last_name=data.last_name,
                age=data.age,
                created_at=now,
                updated_at=now,
            )
            self._users[user.id] = user
            self._sequence[user.id] = next(self._counter)

        logger.debug(f"Stored user in memory: {user.id}")
        return user

    async def find_all(self) -> List[User]:
        with self._lock:
            users = list(self._users.values())
            sequence = dict(self._sequence)

        users.sort(key=lambda u: (u.created_at, sequence[u.id]), reverse=True)
        return users

    async def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return self._email_owner(email)

    async def update(self, user_id: str, data: UpdateUserData) -> User:
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                raise UserNotFoundError(user_id)

            if data.email is not None:
                owner = self._email_owner(data.email)
                if owner is not None and owner.id != user_id:
                    raise EmailConflictError(user_id, data.email)

            changes = data.changes()
            changes["updated_at"] = _advance(current.updated_at)
            updated = current.model_copy(update=changes)
            self._users[user_id] = updated

        return updated

    async def delete(self, user_id: str) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError(user_id)
            self._sequence.pop(user_id, None)

    def clear(self) -> None:
        """Drop every stored user."""
        with self._lock:
            self._users.clear()
            self._sequence.clear()

    def _email_owner(self, email: str) -> Optional[User]:
        # Caller holds the lock
        for user in self._users.values():
            if user.email == email:
                return user
        return None


def _advance(previous: datetime) -> datetime:
    """Current UTC time, nudged forward if the clock has not moved past ``previous``."""
    now = datetime.now(timezone.utc)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
