"""Generic async repository: collection-style reads and writes over one model."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository. Hard-delete is intentionally never exposed."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self):
        return select(self.model)

    def _filtered(self, q, filters: dict[str, Any] | None):
        """Apply simple equality filters; a None value matches NULL columns."""
        for col_name, value in (filters or {}).items():
            col = getattr(self.model, col_name)
            q = q.where(col.is_(None) if value is None else col == value)
        return q

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            self._base_query().where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def find_one(self, filters: dict[str, Any]) -> ModelT | None:
        result = await self._session.execute(
            self._filtered(self._base_query(), filters).limit(1)
        )
        return result.scalars().first()

    async def find(
        self,
        filters: dict[str, Any] | None = None,
        *,
        offset: int = 0,
        limit: int = 20,
    ) -> list[ModelT]:
        """Return matching rows in store order (no ORDER BY)."""
        q = self._filtered(self._base_query(), filters).offset(offset).limit(limit)
        items = (await self._session.execute(q)).scalars().all()
        return list(items)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def update_one(self, filters: dict[str, Any], **values: Any) -> int:
        """Overwrite ``values`` on the first row matching ``filters``; return rows changed."""
        values.pop("id", None)
        first_id = (
            self._filtered(select(self.model.id), filters).limit(1).scalar_subquery()
        )
        result = await self._session.execute(
            update(self.model)
            .where(self.model.id == first_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        return result.rowcount
