"""Generic repository over the ORM models.

Each method is a single round trip to the store and commits on its own, so a
record is written atomically but a sequence of calls is not. Store failures
are rolled back and surfaced as ``StoreError``.
"""

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from cardsets.exceptions import StoreError
from cardsets.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Create/read/filter/update/delete access to one table."""

    def __init__(self, session: AsyncSession, model: type[ModelT]) -> None:
        self.session = session
        self.model = model

    @asynccontextmanager
    async def _store_call(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("%s.%s failed: %s", self.model.__tablename__, operation, e)
            raise StoreError(f"{self.model.__tablename__}.{operation}", str(e)) from e

    def _criteria(self, criteria: dict[str, Any]) -> list[Any]:
        return [getattr(self.model, name) == value for name, value in criteria.items()]

    async def create(self, **values: Any) -> ModelT:
        """Insert a record and return it with store defaults populated."""
        record = self.model(**values)
        async with self._store_call("create"):
            self.session.add(record)
            await self.session.commit()
            await self.session.refresh(record)
        return record

    async def read(self, record_id: str) -> ModelT | None:
        async with self._store_call("read"):
            return await self.session.get(self.model, record_id, populate_existing=True)

    async def filter(self, *, expand: Sequence[str] = (), **criteria: Any) -> list[ModelT]:
        """Return every record matching ``criteria`` in insertion order.

        Args:
            expand: Relationship names to load alongside each record.
            **criteria: Column equality filters.
        """
        stmt = (
            select(self.model)
            .where(*self._criteria(criteria))
            .order_by(self.model.created_at, self.model.id)  # type: ignore[attr-defined]
            .execution_options(populate_existing=True)
        )
        for name in expand:
            stmt = stmt.options(selectinload(getattr(self.model, name)))
        async with self._store_call("filter"):
            result = await self.session.execute(stmt)
            return list(result.scalars().all())

    async def select(self, columns: Sequence[str], **criteria: Any) -> list[dict[str, Any]]:
        """Return a projection of the matching records as plain dicts."""
        stmt = (
            select(*(getattr(self.model, name) for name in columns))
            .where(*self._criteria(criteria))
            .order_by(self.model.created_at, self.model.id)  # type: ignore[attr-defined]
        )
        async with self._store_call("select"):
            result = await self.session.execute(stmt)
            return [dict(row) for row in result.mappings().all()]

    async def increment(self, record_id: str, **deltas: int) -> int:
        """Add ``deltas`` to numeric columns in one UPDATE statement.

        The new value is computed by the store (``col = col + n``), never read
        back and rewritten, so concurrent increments don't lose updates.

        Returns:
            Number of rows updated (0 if the record doesn't exist).
        """
        values = {name: getattr(self.model, name) + delta for name, delta in deltas.items()}
        stmt = update(self.model).where(self.model.id == record_id).values(**values)  # type: ignore[attr-defined]
        async with self._store_call("increment"):
            result = await self.session.execute(stmt)
            await self.session.commit()
        return result.rowcount

    async def delete(self, record_ids: str | Sequence[str]) -> int:
        """Delete one record or a batch of records by id."""
        ids = [record_ids] if isinstance(record_ids, str) else list(record_ids)
        if not ids:
            return 0
        stmt = delete(self.model).where(self.model.id.in_(ids))  # type: ignore[attr-defined]
        async with self._store_call("delete"):
            result = await self.session.execute(stmt)
            await self.session.commit()
        return result.rowcount
