"""
Name: User Use Case Tests

Responsibilities:
  - Verify the five command/query handlers against the repository port
  - Verify failing use-cases perform no writes
  - Verify the email lookup is skipped when the email does not change
"""

import pytest

from app.modules.user_management.application.commands.create_user import CreateUserCommand
from app.modules.user_management.application.commands.delete_user import DeleteUserCommand
from app.modules.user_management.application.commands.update_user import UpdateUserCommand
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
from app.shared.core.exceptions import (
    DuplicateEmailError,
    EmailConflictError,
    UserErrorKind,
    UserNotFoundError,
)

pytestmark = pytest.mark.unit


def _john() -> CreateUserCommand:
    return CreateUserCommand(email="john.doe@example.com", first_name="John", last_name="Doe", age=30)


def _jane() -> CreateUserCommand:
    return CreateUserCommand(email="jane.smith@example.com", first_name="Jane", last_name="Smith", age=25)


class TestCreateUser:
    async def test_creates_user_with_storage_assigned_fields(self, recording_repository):
        user = await CreateUserCommandHandler(recording_repository).handle(_john())

        assert user.email == "john.doe@example.com"
        assert user.first_name == "John"
        assert user.last_name == "Doe"
        assert user.age == 30
        assert user.id
        assert user.created_at == user.updated_at
        assert recording_repository.methods_called() == ["find_by_email", "create"]

    async def test_duplicate_email_fails_without_write(self, recording_repository):
        handler = CreateUserCommandHandler(recording_repository)
        await handler.handle(_john())
        recording_repository.reset_calls()

        with pytest.raises(DuplicateEmailError) as exc_info:
            await handler.handle(_john())

        assert exc_info.value.kind is UserErrorKind.DUPLICATE_EMAIL
        assert exc_info.value.email == "john.doe@example.com"
        assert recording_repository.writes() == []
        assert len(await recording_repository.find_all()) == 1

    async def test_email_comparison_is_exact(self, repository):
        handler = CreateUserCommandHandler(repository)
        await handler.handle(_john())

        upper = CreateUserCommand(email="John.Doe@example.com", first_name="John", last_name="Doe", age=30)
        user = await handler.handle(upper)

        assert user.email == "John.Doe@example.com"
        assert len(await repository.find_all()) == 2


class TestGetUsers:
    async def test_get_all_returns_newest_first(self, repository):
        handler = CreateUserCommandHandler(repository)
        john = await handler.handle(_john())
        jane = await handler.handle(_jane())

        users = await GetAllUsersQueryHandler(repository).handle(GetAllUsersQuery())

        assert [u.id for u in users] == [jane.id, john.id]

    async def test_get_all_on_empty_store(self, repository):
        assert await GetAllUsersQueryHandler(repository).handle(GetAllUsersQuery()) == []

    async def test_get_by_id_returns_user(self, repository):
        created = await CreateUserCommandHandler(repository).handle(_john())

        user = await GetUserByIdQueryHandler(repository).handle(GetUserByIdQuery(user_id=created.id))

        assert user == created

    async def test_get_by_unknown_id_raises_not_found(self, repository):
        with pytest.raises(UserNotFoundError) as exc_info:
            await GetUserByIdQueryHandler(repository).handle(GetUserByIdQuery(user_id="non-existent-id"))

        assert exc_info.value.kind is UserErrorKind.NOT_FOUND
        assert exc_info.value.user_id == "non-existent-id"

    async def test_reads_are_idempotent(self, repository):
        created = await CreateUserCommandHandler(repository).handle(_john())
        list_handler = GetAllUsersQueryHandler(repository)
        get_handler = GetUserByIdQueryHandler(repository)

        assert await list_handler.handle(GetAllUsersQuery()) == await list_handler.handle(GetAllUsersQuery())
        query = GetUserByIdQuery(user_id=created.id)
        assert await get_handler.handle(query) == await get_handler.handle(query)


class TestUpdateUser:
    async def test_partial_update_leaves_other_fields(self, repository):
        created = await CreateUserCommandHandler(repository).handle(_john())

        updated = await UpdateUserCommandHandler(repository).handle(
            UpdateUserCommand(user_id=created.id, first_name="Jonathan")
        )

        assert updated.id == created.id
        assert updated.first_name == "Jonathan"
        assert updated.last_name == "Doe"
        assert updated.email == "john.doe@example.com"
        assert updated.age == 30
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at

    async def test_empty_update_advances_updated_at(self, repository):
        created = await CreateUserCommandHandler(repository).handle(_john())

        updated = await UpdateUserCommandHandler(repository).handle(UpdateUserCommand(user_id=created.id))

        assert updated.updated_at > created.updated_at
        assert updated.model_dump(exclude={"updated_at"}) == created.model_dump(exclude={"updated_at"})

    async def test_unknown_id_fails_without_write(self, recording_repository):
        with pytest.raises(UserNotFoundError):
            await UpdateUserCommandHandler(recording_repository).handle(
                UpdateUserCommand(user_id="non-existent-id", first_name="Ghost")
            )

        assert recording_repository.writes() == []

    async def test_taking_another_users_email_conflicts(self, recording_repository):
        create = CreateUserCommandHandler(recording_repository)
        john = await create.handle(_john())
        jane = await create.handle(_jane())
        recording_repository.reset_calls()

        with pytest.raises(EmailConflictError) as exc_info:
            await UpdateUserCommandHandler(recording_repository).handle(
                UpdateUserCommand(user_id=john.id, email=jane.email)
            )

        assert exc_info.value.kind is UserErrorKind.EMAIL_CONFLICT
        assert exc_info.value.user_id == john.id
        assert exc_info.value.email == jane.email
        assert recording_repository.writes() == []
        assert (await recording_repository.find_by_id(john.id)).email == "john.doe@example.com"

    async def test_unchanged_email_skips_lookup(self, recording_repository):
        john = await CreateUserCommandHandler(recording_repository).handle(_john())
        recording_repository.reset_calls()

        updated = await UpdateUserCommandHandler(recording_repository).handle(
            UpdateUserCommand(user_id=john.id, email=john.email, age=31)
        )

        assert updated.age == 31
        assert "find_by_email" not in recording_repository.methods_called()
        assert recording_repository.methods_called() == ["find_by_id", "update"]

    async def test_changing_to_free_email_succeeds(self, repository):
        john = await CreateUserCommandHandler(repository).handle(_john())

        updated = await UpdateUserCommandHandler(repository).handle(
            UpdateUserCommand(user_id=john.id, email="johnny@example.com")
        )

        assert updated.email == "johnny@example.com"
        assert await repository.find_by_email("john.doe@example.com") is None


class TestDeleteUser:
    async def test_delete_removes_user(self, repository):
        john = await CreateUserCommandHandler(repository).handle(_john())

        result = await DeleteUserCommandHandler(repository).handle(DeleteUserCommand(user_id=john.id))

        assert result is None
        with pytest.raises(UserNotFoundError):
            await GetUserByIdQueryHandler(repository).handle(GetUserByIdQuery(user_id=john.id))

    async def test_delete_twice_second_is_not_found(self, recording_repository):
        john = await CreateUserCommandHandler(recording_repository).handle(_john())
        handler = DeleteUserCommandHandler(recording_repository)
        await handler.handle(DeleteUserCommand(user_id=john.id))
        recording_repository.reset_calls()

        with pytest.raises(UserNotFoundError):
            await handler.handle(DeleteUserCommand(user_id=john.id))

        assert recording_repository.writes() == []

    async def test_deleted_email_can_be_reused(self, repository):
        create = CreateUserCommandHandler(repository)
        john = await create.handle(_john())
        await DeleteUserCommandHandler(repository).handle(DeleteUserCommand(user_id=john.id))

        again = await create.handle(_john())

        assert again.id != john.id
