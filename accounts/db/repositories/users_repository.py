"""
Users repository - all user data access behind one protocol.
Challenge: Map domain users to rows without leaking storage into the domain.
Design: Storage errors are raised as SQLAlchemy raised them; nothing is retried.
"""

import logging
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from accounts.core.exceptions import InvalidArgumentError, NotFoundError
from accounts.db.models.user import UserRow
from accounts.db.repositories.base_repository import BaseRepository
from accounts.domain.user import USER_FIELDS, User, validate

logger = logging.getLogger(__name__)

_PERSISTED = tuple(spec for spec in USER_FIELDS if spec.column)


class UsersRepository(Protocol):
    async def create(self, user: User | None) -> None: ...

    async def find_by_id(self, id: int) -> User: ...

    async def find_by_email(self, email: str) -> User: ...

    async def update(self, user: User | None) -> None: ...


def row_to_user(row: UserRow) -> User:
    return User(**{spec.name: getattr(row, spec.column) for spec in _PERSISTED})


def copy_user_to_row(user: User, row: UserRow) -> UserRow:
    """Write every mapped column except the server-assigned primary key."""
    for spec in _PERSISTED:
        if spec.column != "id":
            setattr(row, spec.column, getattr(user, spec.name))
    return row


def _require_user(user: object) -> None:
    if not isinstance(user, User):
        raise TypeError(f"expected a User, got {type(user).__name__}")


class SqlUsersRepository(BaseRepository[UserRow]):
    """Users repository over the `users` table."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, UserRow)

    async def create(self, user: User | None) -> None:
        """Insert the user and set user.id to the assigned key."""
        validate(user)
        _require_user(user)
        row = await self.add(copy_user_to_row(user, UserRow()))
        user.id = row.id
        logger.debug("created user id=%s", user.id)

    async def find_by_id(self, id: int) -> User:
        if id is None or id <= 0:
            raise InvalidArgumentError("valid positive ID is required to find a user")
        row = await self.get_by_id(id)
        if row is None:
            raise NotFoundError()
        return row_to_user(row)

    async def find_by_email(self, email: str) -> User:
        if not email:
            raise InvalidArgumentError("valid positive email is required to find a user")
        row = await self.get_one_by(UserRow.email, email)
        if row is None:
            raise NotFoundError()
        return row_to_user(row)

    async def update(self, user: User | None) -> None:
        """Overwrite the stored row of an already persisted user."""
        validate(user)
        _require_user(user)
        if user.id <= 0:
            raise InvalidArgumentError("valid positive ID is required to update a user")
        row = await self.get_by_id(user.id)
        if row is None:
            raise NotFoundError()
        copy_user_to_row(user, row)
        await self.session.flush()
        logger.debug("updated user id=%s", user.id)
