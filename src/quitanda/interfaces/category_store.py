"""Category store interface.

Describes the persistence collaborator used by the category manager: a record
store keyed by category id, queried by simple equality filters.

Conventions for every implementation:
  - Filter and ordering keys must be category field names
    (see `quitanda.domain.category.CATEGORY_FIELDS`); unknown keys raise
    `InvalidQueryError`.
  - String ordering is by code point (binary collation, case-sensitive).
  - Results are always totally ordered: ties on the requested keys are broken
    by `id` ascending.
  - Returned records are detached copies; mutating them has no effect on the
    store until they are passed to `persist`.
"""

from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from quitanda.domain.category import CATEGORY_FIELDS, Category

from .errors import InvalidQueryError


class SortDirection(str, Enum):
    """Sort direction for a single ordering key."""

    ASC = "ASC"
    DESC = "DESC"


def check_fields(keys: Iterable[str]) -> None:
    """Raise `InvalidQueryError` for the first key that is not a category field."""
    for key in keys:
        if key not in CATEGORY_FIELDS:
            raise InvalidQueryError(key)


class CategoryStore(abc.ABC):
    """Contract for a category record store."""

    @abc.abstractmethod
    async def find_many(
        self,
        where: Mapping[str, Any] | None = None,
        order_by: Mapping[str, SortDirection] | None = None,
    ) -> list[Category]:
        """Return every category matching `where`, sorted per `order_by`.

        Args:
            where: Optional equality filter, e.g. ``{"active": True}``.
                ``None`` (or an empty mapping) matches every record.
            order_by: Ordering keys in priority order, e.g.
                ``{"name": SortDirection.ASC}``. Ties, and the ``None`` case,
                fall back to ``id`` ascending.

        Raises:
            InvalidQueryError: If a key is not a category field.
        """

    @abc.abstractmethod
    async def find_one(self, where: Mapping[str, Any]) -> Category | None:
        """Return the first category matching the equality filter, or None.

        Raises:
            InvalidQueryError: If a key is not a category field.
        """

    def instantiate(self, fields: Mapping[str, Any]) -> Category:
        """Shape an unsaved `Category` from `fields` (no persistence side effect).

        Unknown keys are ignored; `id` is always None on the returned record.

        Raises:
            TypeError: If `fields` has no `name`.
        """
        values = {
            key: value
            for key, value in fields.items()
            if key in CATEGORY_FIELDS and key != "id"
        }
        return Category(id=None, **values)

    @abc.abstractmethod
    async def persist(self, category: Category) -> Category:
        """Durably store `category` and return the stored record.

        Inserts when the category has no id (assigning a fresh one) or its id
        is unknown to the store; otherwise replaces the stored record.
        """
