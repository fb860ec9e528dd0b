# 📄 File: scripts/seed_users.py
# 🧭 Purpose (Layman Explanation):
# Fills an empty (or throwaway) database with three example users so the API has something
# to show right away. Any existing users are removed first.
# 🧪 Purpose (Technical Summary):
# argparse CLI that wipes the users table and inserts fixture users through the Create
# use-case, so the same uniqueness rules apply as over HTTP.
# 🔗 Dependencies:
# - app.shared.infrastructure.database.connection (engine, create_tables)
# - app.shared.infrastructure.database.session (transactional session)
# - app.modules.user_management (handlers, SQLAlchemy repository)
# 🔄 Connected Modules / Calls From:
# - Developers, CI fixtures

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.modules.user_management.application.commands.create_user import CreateUserCommand
from app.modules.user_management.application.handlers.command_handlers import CreateUserCommandHandler
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import DatabaseConnectionManager
from app.shared.infrastructure.database.session import DatabaseSessionManager
from app.shared.utils.logging import setup_logging

SEED_USERS = [
    CreateUserCommand(email="john.doe@example.com", first_name="John", last_name="Doe", age=30),
    CreateUserCommand(email="jane.smith@example.com", first_name="Jane", last_name="Smith", age=25),
    CreateUserCommand(email="bob.johnson@example.com", first_name="Bob", last_name="Johnson", age=35),
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replace all users with sample data")
    parser.add_argument(
        "--database-url",
        dest="database_url",
        default=None,
        help="Async SQLAlchemy URL (defaults to DATABASE_URL)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create the schema before seeding (use migrations for real databases)",
    )
    return parser.parse_args(argv)


async def seed(session: AsyncSession) -> List[User]:
    """Delete every user, then create the sample users in order."""
    repository = UserRepositoryImpl(session)
    await repository.delete_all()

    handler = CreateUserCommandHandler(repository)
    return [await handler.handle(command) for command in SEED_USERS]


async def run(database_url: Optional[str], create_tables: bool) -> List[User]:
    settings = get_settings()
    if database_url:
        settings = settings.model_copy(update={"DATABASE_URL": database_url})

    manager = DatabaseConnectionManager(settings)
    await manager.initialize()

    try:
        if create_tables:
            await manager.create_tables()

        sessions = DatabaseSessionManager()
        await sessions.initialize(manager.engine)
        async with sessions.get_session() as session:
            users = await seed(session)
    finally:
        await manager.close()

    return users


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(log_format="text")

    try:
        users = asyncio.run(run(args.database_url, args.create_tables))
    except ConnectionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for user in users:
        print(f"Created user {user.id}: {user.first_name} {user.last_name} <{user.email}>, age {user.age}")
    print(f"Seeded {len(users)} users")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
