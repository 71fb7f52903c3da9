"""
Session scope tests - commit on success, rollback on error.
"""

import pytest

from accounts.core.exceptions import NotFoundError
from accounts.db.repositories import GlobalRepository, SqlUsersRepository
from accounts.db.session import session_scope


@pytest.mark.asyncio
async def test_session_scope_commits(session_maker, user):
    async with session_scope(session_maker) as session:
        repos = GlobalRepository(session)
        assert isinstance(repos.users, SqlUsersRepository)
        await repos.users.create(user)

    async with session_maker() as session:
        found = await SqlUsersRepository(session).find_by_id(user.id)
    assert found == user


@pytest.mark.asyncio
async def test_session_scope_rolls_back_on_error(session_maker, user):
    with pytest.raises(RuntimeError):
        async with session_scope(session_maker) as session:
            await GlobalRepository(session).users.create(user)
            raise RuntimeError("boom")

    async with session_maker() as session:
        with pytest.raises(NotFoundError):
            await SqlUsersRepository(session).find_by_email(user.email)
