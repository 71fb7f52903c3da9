"""
Pytest fixtures - fresh database per test, domain builders.
Challenge: Isolated tests; nothing shared between cases.
"""

import os
from typing import AsyncGenerator

# Cheapest bcrypt cost; must be set before accounts.core.security is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from accounts.db.repositories import MockUsersRepository, SqlUsersRepository
from accounts.db.session import build_engine, build_session_maker, create_tables
from accounts.domain import TempUser, User, new_user


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine):
    return build_session_maker(engine)


@pytest_asyncio.fixture
async def session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as s:
        yield s


@pytest.fixture
def users_repo(session: AsyncSession) -> SqlUsersRepository:
    return SqlUsersRepository(session)


@pytest.fixture
def mock_users() -> MockUsersRepository:
    return MockUsersRepository()


@pytest.fixture
def temp_user() -> TempUser:
    return TempUser(
        first_name="Nick",
        last_name="Doe2",
        email="foo@bar.com",
        password="password123",
        confirm_password="password123",
    )


@pytest.fixture
def user(temp_user: TempUser) -> User:
    return new_user(temp_user)
