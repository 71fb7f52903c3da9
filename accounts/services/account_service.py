"""
Account service - registration and login use cases (SOLID: Single Responsibility).
Challenge: Keep the password lifecycle out of callers.
Design: Depends on the UsersRepository protocol only; easy to test with the mock.
"""

import logging
from collections.abc import Mapping
from typing import Any

import pydantic

from accounts.core.exceptions import CredentialMismatchError, NotFoundError, ValidationError
from accounts.db.repositories.users_repository import UsersRepository
from accounts.domain.schema import FieldViolation
from accounts.domain.user import TempUser, User, new_user, validate

logger = logging.getLogger(__name__)


def parse_registration(data: Mapping[str, Any]) -> TempUser:
    """Build a TempUser from untrusted input. Wrong-typed fields become a ValidationError."""
    try:
        return TempUser.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            FieldViolation("TempUser", ".".join(str(part) for part in err["loc"]), err["type"])
            for err in exc.errors()
        ) from exc


class AccountService:
    """Handles account use cases on top of a users repository."""

    def __init__(self, users: UsersRepository):
        self.users = users

    async def register(self, data: TempUser | Mapping[str, Any]) -> User:
        """Validate the registration, hash the password and store the new user."""
        temp = data if isinstance(data, TempUser) else parse_registration(data)
        validate(temp)
        user = new_user(temp)
        await self.users.create(user)
        logger.info("registered user id=%s", user.id)
        return user

    async def login(self, email: str, password: str) -> User:
        """Return the user if the credentials match an active account."""
        try:
            user = await self.users.find_by_email(email)
        except NotFoundError:
            # Same answer as a wrong password: no account enumeration
            raise CredentialMismatchError() from None
        user.authenticate(password)
        return user

    async def change_password(self, user_id: int, current_password: str, new_password: str) -> User:
        user = await self.users.find_by_id(user_id)
        user.authenticate(current_password)
        user.set_password(new_password)
        await self.users.update(user)
        return user
