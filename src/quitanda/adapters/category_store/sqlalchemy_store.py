"""SQLAlchemy-backed CategoryStore adapter for QUITANDA.

This module provides an asyncio SQLAlchemy Core implementation of the
CategoryStore interface over the ``categories`` table (see
adapters.category_store.schema). Each call runs on its own connection and
transaction; the store does not span a transaction across calls.

String ordering uses the dialect's binary collation so results sort by code
point on every backend, matching the in-memory store.

Exceptions:
    Maps SQLAlchemy errors to QUITANDA category store exceptions.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, String, Text, and_, insert, select, update
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError

from quitanda.adapters.db.dialects import DialectName
from quitanda.adapters.id_generators import ULIDGenerator
from quitanda.domain.category import Category
from quitanda.interfaces.category_store import (
    CategoryStore,
    SortDirection,
    check_fields,
)
from quitanda.interfaces.errors import (
    ConstraintViolationError,
    InvalidRecordError,
    StoreUnavailableError,
)

from .schema import categories

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement
    from sqlalchemy.engine import RowMapping
    from sqlalchemy.ext.asyncio import AsyncEngine

    from quitanda.interfaces.id_generator import IdGenerator


class SqlAlchemyCategoryStore(CategoryStore):
    """SQLAlchemy-backed CategoryStore.

    Args:
        engine: Async engine bound to a database migrated to head.
        id_generator: Source of ids for inserted categories. Defaults to a
            monotonic `ULIDGenerator`.
    """

    def __init__(
        self, engine: AsyncEngine, id_generator: IdGenerator | None = None
    ) -> None:
        self.engine = engine
        self._id_generator = id_generator or ULIDGenerator()
        self._collation = DialectName.from_sqlalchemy(engine).binary_collation

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    async def find_many(
        self,
        where: Mapping[str, Any] | None = None,
        order_by: Mapping[str, SortDirection] | None = None,
    ) -> list[Category]:
        rows = await self._fetch(self._select(where or {}, order_by or {}))
        return [Category(**row) for row in rows]

    async def find_one(self, where: Mapping[str, Any]) -> Category | None:
        rows = await self._fetch(self._select(where, {}).limit(1))
        return Category(**rows[0]) if rows else None

    async def persist(self, category: Category) -> Category:
        stored = replace(category)
        is_new = not stored.is_persisted
        if is_new:
            stored.id = self._id_generator.new_id()
        values = {
            "name": stored.name,
            "description": stored.description,
            "active": stored.active,
        }

        try:
            async with self.engine.begin() as conn:
                updated = 0
                if not is_new:
                    result = await conn.execute(
                        update(categories)
                        .where(categories.c.id == stored.id)
                        .values(**values)
                    )
                    updated = result.rowcount
                if not updated:
                    await conn.execute(
                        insert(categories).values(id=stored.id, **values)
                    )
        except IntegrityError as e:
            raise ConstraintViolationError(str(e.orig or e)) from e
        except DataError as e:  # value too long, wrong type, etc.
            raise InvalidRecordError(str(e)) from e
        except DBAPIError as e:  # OperationalError, InterfaceError, etc.
            raise StoreUnavailableError(str(e)) from e

        return replace(stored)

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _select(
        self, where: Mapping[str, Any], order_by: Mapping[str, SortDirection]
    ) -> Select:
        """Build a SELECT for an equality filter and ordering (ties by id)."""
        check_fields(where)
        check_fields(order_by)

        stmt = select(categories)
        if where:
            stmt = stmt.where(
                and_(*(categories.c[field] == value for field, value in where.items()))
            )
        for field, direction in order_by.items():
            column = self._sortable(field)
            if SortDirection(direction) is SortDirection.DESC:
                stmt = stmt.order_by(column.desc().nulls_first())
            else:
                stmt = stmt.order_by(column.asc().nulls_last())
        return stmt.order_by(self._sortable("id").asc())

    def _sortable(self, field: str) -> ColumnElement:
        column = categories.c[field]
        if isinstance(column.type, (String, Text)):
            return column.collate(self._collation)
        return column

    async def _fetch(self, stmt: Select) -> list[RowMapping]:
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(stmt)
                return list(result.mappings().all())
        except DBAPIError as e:
            raise StoreUnavailableError(str(e)) from e
