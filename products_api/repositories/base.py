"""Generic async repository: predicate-driven count/query plus CRUD."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, and_, delete, func, select, true, update
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)

Predicate = Sequence[ColumnElement[bool]]


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Reads take a *predicate*: a list of SQL clauses that are AND-ed together.
    An empty list matches every row. Callers build the predicate once and pass
    the same list to :meth:`count` and :meth:`query` so both reads always see
    the same filter.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _where(predicate: Predicate) -> ColumnElement[bool]:
        return and_(true(), *predicate)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        return await self._session.get(self.model, entity_id)

    async def count(self, predicate: Predicate = ()) -> int:
        q = select(func.count()).select_from(self.model).where(self._where(predicate))
        return (await self._session.execute(q)).scalar_one()

    async def query(
        self,
        predicate: Predicate = (),
        *,
        order_by: str = "created_at",
        order: str = "desc",
        offset: int = 0,
        limit: int = 10,
    ) -> list[ModelT]:
        """Return one page of rows matching *predicate*.

        Rows are ordered by *order_by* with the primary key as a tie-break in
        the same direction, so pages are stable when timestamps collide.
        """
        q = select(self.model).where(self._where(predicate))

        col = getattr(self.model, order_by, None)
        pk = self.model.id
        if col is not None:
            if order == "desc":
                q = q.order_by(col.desc(), pk.desc())
            else:
                q = q.order_by(col.asc(), pk.asc())
        q = q.offset(offset).limit(limit)

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

    async def update(self, entity_id: int, **kwargs: Any) -> ModelT | None:
        from datetime import datetime, timezone

        kwargs.pop("id", None)
        kwargs.pop("created_at", None)
        if "updated_at" not in kwargs and hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = datetime.now(timezone.utc)

        await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**kwargs)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        instance = await self.get_by_id(entity_id)
        if instance is not None:
            await self._session.refresh(instance)
        return instance

    async def delete(self, entity_id: int) -> bool:
        result = await self._session.execute(
            delete(self.model).where(self.model.id == entity_id)
        )
        await self._session.flush()
        return result.rowcount > 0
