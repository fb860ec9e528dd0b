"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Pin a test configuration before the app is imported
  - Provide in-memory repositories (plain and call-recording)
  - Provide an HTTP client wired to the in-memory repository

Notes:
  - The TestClient is used without its context manager so the lifespan
    never opens a database connection
"""

import os
import sys
from pathlib import Path
from typing import Any, List, Tuple

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ["ENVIRONMENT"] = "test"
os.environ["API_PREFIX"] = ""
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from app.shared.config import settings as settings_module  # noqa: E402

settings_module.Settings.model_config["env_file"] = None
settings_module.get_settings.cache_clear()

from fastapi.testclient import TestClient  # noqa: E402

from app.modules.user_management.domain.models.user import (  # noqa: E402
    CreateUserData,
    UpdateUserData,
    User,
)
from app.modules.user_management.infrastructure.memory import InMemoryUserRepository  # noqa: E402


class RecordingUserRepository(InMemoryUserRepository):
    """In-memory repository that records every port call as (method, args)."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def methods_called(self) -> List[str]:
        return [name for name, _ in self.calls]

    def writes(self) -> List[str]:
        return [name for name in self.methods_called() if name in ("create", "update", "delete")]

    def reset_calls(self) -> None:
        self.calls.clear()

    async def create(self, data: CreateUserData) -> User:
        self.calls.append(("create", (data,)))
        return await super().create(data)

    async def find_all(self) -> List[User]:
        self.calls.append(("find_all", ()))
        return await super().find_all()

    async def find_by_id(self, user_id: str):
        self.calls.append(("find_by_id", (user_id,)))
        return await super().find_by_id(user_id)

    async def find_by_email(self, email: str):
        self.calls.append(("find_by_email", (email,)))
        return await super().find_by_email(email)

    async def update(self, user_id: str, data: UpdateUserData) -> User:
        self.calls.append(("update", (user_id, data)))
        return await super().update(user_id, data)

    async def delete(self, user_id: str) -> None:
        self.calls.append(("delete", (user_id,)))
        return await super().delete(user_id)


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def recording_repository() -> RecordingUserRepository:
    return RecordingUserRepository()


@pytest.fixture(scope="session")
def make_recording_repository():
    """Factory for tests that need a fresh repository per generated example."""
    return RecordingUserRepository


@pytest.fixture
def john_data() -> CreateUserData:
    return CreateUserData(email="john.doe@example.com", first_name="John", last_name="Doe", age=30)


@pytest.fixture
def jane_data() -> CreateUserData:
    return CreateUserData(email="jane.smith@example.com", first_name="Jane", last_name="Smith", age=25)


@pytest.fixture
def app(repository: InMemoryUserRepository):
    from app.main import create_application
    from app.modules.user_management.presentation.dependencies import get_user_repository

    application = create_application()
    application.dependency_overrides[get_user_repository] = lambda: repository
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
