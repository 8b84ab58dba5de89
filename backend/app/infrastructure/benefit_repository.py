"""SQLAlchemy Benefit Repository — async adapter implementing BenefitRepository.

Invariants:
    - create/update validate the entity before touching the database
    - Absence is reported as None (find_by_id, update) or False (delete)
    - Every SQLAlchemyError is rolled back and re-raised as StorageError
    - Outside transaction() each write commits; inside it writes are only
      flushed and the unit commits (or rolls back) once
    - Listings are ordered by name ascending unless told otherwise, with id
      as tie-breaker so pages are stable

Design Decisions:
    - One repository per AsyncSession (one per request via get_db)
    - Nested transaction() calls join the outer unit instead of opening savepoints
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable, TypeVar

from sqlalchemy import Select, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.benefit import Benefit
from app.core.domain_types import (
    BenefitId, ListOptions, OrderDirection, OrderField,
)
from app.core.errors import StorageError
from app.models.benefit import BenefitModel

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ORDER_COLUMNS = {
    OrderField.ID: BenefitModel.id,
    OrderField.NAME: BenefitModel.name,
    OrderField.CREATED_AT: BenefitModel.created_at,
    OrderField.UPDATED_AT: BenefitModel.updated_at,
}


def _to_entity(row: BenefitModel) -> Benefit:
    return Benefit.from_data({
        "id": row.id,
        "name": row.name,
        "description": row.description,
        "is_active": row.is_active,
        "created_at": row.created_at,
        "updated_at": row.updated_at,
    })


def _apply_options(stmt: Select, options: ListOptions | None) -> Select:
    """Apply ordering and pagination from ListOptions."""
    options = options or ListOptions()
    column = _ORDER_COLUMNS[OrderField(options.order_by)]
    if OrderDirection(options.order_direction) == OrderDirection.DESC:
        stmt = stmt.order_by(column.desc(), BenefitModel.id.desc())
    else:
        stmt = stmt.order_by(column.asc(), BenefitModel.id.asc())
    if options.limit:
        stmt = stmt.limit(options.limit)
    if options.offset:
        stmt = stmt.offset(options.offset)
    return stmt


def _like_pattern(fragment: str) -> str:
    escaped = (
        fragment.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )
    return f"%{escaped}%"


class SqlAlchemyBenefitRepository:
    """Benefit persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self._transaction_depth = 0

    @asynccontextmanager
    async def _storage_errors(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except SQLAlchemyError as e:
            if not self._transaction_depth:
                await self.db.rollback()
            logger.error(
                f"Benefit storage {operation} failed: {e}",
                extra={"operation": operation},
            )
            raise StorageError(type(e).__name__, operation) from e

    async def _commit(self) -> None:
        if self._transaction_depth:
            await self.db.flush()
        else:
            await self.db.commit()

    async def _find(self, stmt: Select, operation: str) -> list[Benefit]:
        async with self._storage_errors(operation):
            result = await self.db.execute(stmt)
            return [_to_entity(row) for row in result.scalars().all()]

    # ─── Writes ──────────────────────────────────────────────────

    async def create(self, benefit: Benefit) -> Benefit:
        benefit.validate()
        async with self._storage_errors("create"):
            row = BenefitModel(
                name=benefit.name,
                description=benefit.description,
                is_active=benefit.is_active,
            )
            self.db.add(row)
            await self._commit()
            await self.db.refresh(row)
            return _to_entity(row)

    async def update(
        self, benefit_id: BenefitId, benefit: Benefit,
    ) -> Benefit | None:
        benefit.validate()
        async with self._storage_errors("update"):
            row = await self.db.get(BenefitModel, benefit_id)
            if row is None:
                return None
            row.name = benefit.name
            row.description = benefit.description
            row.is_active = benefit.is_active
            row.updated_at = benefit.updated_at
            await self._commit()
            await self.db.refresh(row)
            return _to_entity(row)

    async def delete(self, benefit_id: BenefitId) -> bool:
        async with self._storage_errors("delete"):
            result = await self.db.execute(
                delete(BenefitModel).where(BenefitModel.id == benefit_id),
            )
            await self._commit()
            return result.rowcount > 0

    # ─── Reads ───────────────────────────────────────────────────

    async def find_by_id(self, benefit_id: BenefitId) -> Benefit | None:
        async with self._storage_errors("find_by_id"):
            row = await self.db.get(BenefitModel, benefit_id)
            return _to_entity(row) if row is not None else None

    async def find_all(self, options: ListOptions | None = None) -> list[Benefit]:
        return await self._find(
            _apply_options(select(BenefitModel), options), "find_all",
        )

    async def find_active(self, options: ListOptions | None = None) -> list[Benefit]:
        stmt = select(BenefitModel).where(BenefitModel.is_active.is_(True))
        return await self._find(_apply_options(stmt, options), "find_active")

    async def find_inactive(
        self, options: ListOptions | None = None,
    ) -> list[Benefit]:
        stmt = select(BenefitModel).where(BenefitModel.is_active.is_(False))
        return await self._find(_apply_options(stmt, options), "find_inactive")

    async def find_by_name(
        self, name: str, options: ListOptions | None = None,
    ) -> list[Benefit]:
        """Case-insensitive substring match; % and _ in `name` match literally."""
        stmt = select(BenefitModel).where(
            BenefitModel.name.ilike(_like_pattern(name), escape="\\"),
        )
        return await self._find(_apply_options(stmt, options), "find_by_name")

    async def count(self, is_active: bool | None = None) -> int:
        stmt = select(func.count()).select_from(BenefitModel)
        if is_active is not None:
            stmt = stmt.where(BenefitModel.is_active.is_(is_active))
        async with self._storage_errors("count"):
            return (await self.db.execute(stmt)).scalar_one()

    async def exists_by_name(
        self, name: str, exclude_id: BenefitId | None = None,
    ) -> bool:
        stmt = (
            select(func.count())
            .select_from(BenefitModel)
            .where(BenefitModel.name == name.strip())
        )
        if exclude_id is not None:
            stmt = stmt.where(BenefitModel.id != exclude_id)
        async with self._storage_errors("exists_by_name"):
            return (await self.db.execute(stmt)).scalar_one() > 0

    # ─── Unit of work ────────────────────────────────────────────

    async def transaction(self, fn: Callable[[], Awaitable[T]]) -> T:
        """Run `fn` as one unit of work; any exception rolls it all back."""
        if self._transaction_depth:
            return await fn()
        self._transaction_depth += 1
        try:
            result = await fn()
            async with self._storage_errors("commit"):
                await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        finally:
            self._transaction_depth -= 1
        return result
