"""Generic async CRUD repository."""

from typing import ClassVar, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from app.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyRepository(Generic[ModelT]):
    """CRUD access to one mapped entity.

    Writes are flushed immediately so that store-assigned ids and
    constraint violations surface inside the calling operation. Committing
    is left to the owner of the session.
    """

    model: ClassVar[type[Base]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, entity_id: int) -> ModelT | None:
        """Return the entity with ``entity_id``, or None when absent."""
        return await self._session.get(self.model, entity_id)  # type: ignore[return-value]

    async def list_all(self) -> list[ModelT]:
        """Return all entities ordered by primary key."""
        return await self._find()

    async def save(self, entity: ModelT) -> ModelT:
        """Insert or update ``entity`` and flush it to the store."""
        self._session.add(entity)
        await self._session.flush()
        return entity

    async def delete(self, entity: ModelT) -> None:
        """Delete ``entity`` and whatever the mapping cascades to."""
        await self._session.delete(entity)
        await self._session.flush()

    async def _find(self, *criteria: ColumnElement[bool]) -> list[ModelT]:
        """Derived query: all rows matching every criterion, by primary key."""
        stmt = select(self.model).where(*criteria).order_by(self.model.id)  # type: ignore[attr-defined]
        result = await self._session.scalars(stmt)
        return list(result.all())  # type: ignore[arg-type]
