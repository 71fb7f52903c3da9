"""Registry of repositories bound to one session."""

from sqlalchemy.ext.asyncio import AsyncSession

from accounts.db.repositories.users_repository import SqlUsersRepository, UsersRepository


class GlobalRepository:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.users: UsersRepository = SqlUsersRepository(session)
