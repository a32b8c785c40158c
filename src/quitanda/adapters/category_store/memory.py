"""In-memory CategoryStore implementation.

All categories are kept in a dict and lost when the instance is discarded.
Use for unit tests, prototyping, or scenarios where durability is not required.

This implementation passes all contract tests for the CategoryStore interface.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from quitanda.adapters.id_generators import SimpleIdGenerator
from quitanda.domain.category import Category
from quitanda.interfaces.category_store import (
    CategoryStore,
    SortDirection,
    check_fields,
)
from quitanda.interfaces.id_generator import IdGenerator


def _sort_key(value: Any) -> tuple[bool, Any]:
    # None sorts after every value in ascending order (NULLS LAST)
    return (value is None, value)


class InMemoryCategoryStore(CategoryStore):
    """In-memory CategoryStore for testing and non-durable use cases.

    Args:
        categories: Optional seed records. Each must already carry an id.
        id_generator: Source of ids for inserted categories. Defaults to a
            `SimpleIdGenerator` ("1", "2", ...).

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded test scenarios.
    """

    def __init__(
        self,
        categories: Iterable[Category] = (),
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._id_generator = id_generator or SimpleIdGenerator()
        self._records: dict[str, Category] = {}
        for category in categories:
            if category.id is None:
                raise ValueError("Seed categories must have an id")
            self._records[category.id] = replace(category)

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    async def find_many(
        self,
        where: Mapping[str, Any] | None = None,
        order_by: Mapping[str, SortDirection] | None = None,
    ) -> list[Category]:
        where = where or {}
        order_by = order_by or {}
        check_fields(where)
        check_fields(order_by)

        matches = self._matching(where)
        # list.sort is stable: apply the lowest-priority key first
        for field, direction in reversed(list(order_by.items())):
            matches.sort(
                key=lambda c, f=field: _sort_key(getattr(c, f)),
                reverse=SortDirection(direction) is SortDirection.DESC,
            )
        return [replace(category) for category in matches]

    async def find_one(self, where: Mapping[str, Any]) -> Category | None:
        check_fields(where)
        matches = self._matching(where)
        return replace(matches[0]) if matches else None

    async def persist(self, category: Category) -> Category:
        stored = replace(category)
        if not stored.is_persisted:
            stored.id = self._new_id()
        self._records[stored.id] = stored
        return replace(stored)

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _new_id(self) -> str:
        """Draw ids until one is not held by a stored record."""
        while (new_id := self._id_generator.new_id()) in self._records:
            pass
        return new_id

    def _matching(self, where: Mapping[str, Any]) -> list[Category]:
        """Return stored records equal on every `where` field, in id order."""
        return [
            category
            for _, category in sorted(self._records.items())
            if all(getattr(category, field) == value for field, value in where.items())
        ]

    def __len__(self) -> int:
        return len(self._records)
