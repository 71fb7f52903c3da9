"""
Recording test double for UsersRepository.
Records every call in order and answers with configured results.
"""

from typing import Any

from accounts.core.exceptions import NotFoundError
from accounts.domain.user import User


class MockUsersRepository:
    def __init__(self):
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._results: dict[str, Any] = {}
        self._errors: dict[str, Exception] = {}

    def will_return(self, method: str, result: Any) -> "MockUsersRepository":
        self._results[method] = result
        self._errors.pop(method, None)
        return self

    def will_raise(self, method: str, error: Exception) -> "MockUsersRepository":
        self._errors[method] = error
        return self

    def calls_to(self, method: str) -> list[tuple[Any, ...]]:
        return [args for name, args in self.calls if name == method]

    def _answer(self, method: str, *args: Any) -> Any:
        self.calls.append((method, args))
        if method in self._errors:
            raise self._errors[method]
        return self._results.get(method)

    async def create(self, user: User | None) -> None:
        self._answer("create", user)

    async def find_by_id(self, id: int) -> User:
        user = self._answer("find_by_id", id)
        if user is None:
            raise NotFoundError()
        return user

    async def find_by_email(self, email: str) -> User:
        user = self._answer("find_by_email", email)
        if user is None:
            raise NotFoundError()
        return user

    async def update(self, user: User | None) -> None:
        self._answer("update", user)
