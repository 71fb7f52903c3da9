# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from accounts.db.repositories.base_repository import BaseRepository
from accounts.db.repositories.global_repository import GlobalRepository
from accounts.db.repositories.mock_users_repository import MockUsersRepository
from accounts.db.repositories.users_repository import SqlUsersRepository, UsersRepository

__all__ = [
    "BaseRepository",
    "GlobalRepository",
    "MockUsersRepository",
    "SqlUsersRepository",
    "UsersRepository",
]
