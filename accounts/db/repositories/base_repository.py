"""
Base repository - generic single-row access over one ORM model.
Challenge: Consistent data access, testability via mocks, point lookups in one place.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define entity-specific methods."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> ModelType | None:
        """Fetch a single row by primary key."""
        return await self.get_one_by(self.model.id, id)

    async def get_one_by(self, column: Any, value: Any) -> ModelType | None:
        """Fetch at most one row where column == value."""
        result = await self.session.execute(select(self.model).where(column == value).limit(1))
        return result.scalar_one_or_none()

    async def add(self, row: ModelType) -> ModelType:
        """Persist new row. Caller commits session."""
        self.session.add(row)
        await self.session.flush()  # Get ID without committing
        await self.session.refresh(row)
        return row
