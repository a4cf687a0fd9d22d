"""SQLAlchemy implementation of the generic Repository."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import exists, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified

from src.domain.repositories.base import Repository
from src.domain.specifications import Specification
from src.infrastructure.database import MAX_ID, MIN_ID, BaseEntity
from src.infrastructure.persistence.specifications.evaluator import evaluate

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseEntity)


def _storable(id: int) -> bool:
    return MIN_ID <= id <= MAX_ID


class SqlRepository(Repository[T], Generic[T]):
    """Repository over one mapped entity type, bound to a request's session."""

    def __init__(self, session: AsyncSession, model: type[T]) -> None:
        self._session = session
        self._model = model

    @property
    def model(self) -> type[T]:
        return self._model

    async def get_by_id(self, id: int) -> T | None:
        if not _storable(id):
            return None
        return await self._session.get(self._model, id)

    async def list_all(self) -> list[T]:
        result = await self._session.execute(select(self._model))
        return list(result.scalars().all())

    async def get_entity_with_spec(self, spec: Specification[T]) -> T | None:
        result = await self._session.execute(self._apply_spec(spec).limit(1))
        return result.scalars().first()

    async def list_with_spec(self, spec: Specification[T]) -> list[Any]:
        result = await self._session.execute(self._apply_spec(spec))
        return list(result.scalars().all())

    async def count_with_spec(self, spec: Specification[T]) -> int:
        stmt = select(func.count()).select_from(self._model)
        if spec.criteria is not None:
            stmt = stmt.where(spec.criteria)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def add(self, entity: T) -> None:
        self._session.add(entity)

    async def update(self, entity: T) -> None:
        # merge() attaches the detached instance onto the stored row; every
        # non-key column is then flagged so the flush writes a full replace.
        merged = await self._session.merge(entity)
        for column in inspect(self._model).column_attrs:
            if column.key != "id":
                flag_modified(merged, column.key)

    async def remove(self, entity: T) -> None:
        await self._session.delete(entity)

    async def exists(self, id: int) -> bool:
        if not _storable(id):
            return False
        stmt = select(exists().where(self._model.id == id))
        with self._session.no_autoflush:
            result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def save_changes(self) -> bool:
        affected = self._pending_row_count()
        await self._session.commit()
        logger.debug("Committed %d %s change(s)", affected, self._model.__name__)
        return affected > 0

    def _pending_row_count(self) -> int:
        session = self._session
        modified = [obj for obj in session.dirty if session.is_modified(obj)]
        return len(session.new) + len(modified) + len(session.deleted)

    def _apply_spec(self, spec: Specification[T]):
        return evaluate(select(self._model), spec)
