"""Module defining the category manager's input commands."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, ClassVar

from quitanda.domain.category import Category
from quitanda.interfaces.unsettable import UNSET, Unsettable, resolve


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class CreateCategory(Command):
    """Command to create a new category.

    There is deliberately no `active` field: new categories always start active.
    """

    name: str
    description: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> CreateCategory:
        """Build the command from raw input.

        Only `name` and `description` are read; anything else in the payload
        (notably `active` and `id`) is ignored.

        Raises:
            KeyError: If `name` is missing from the payload.
        """
        return cls(name=payload["name"], description=payload.get("description"))


@dataclass(frozen=True)
class UpdateCategory(Command):
    """Command to merge new values onto an existing category.

    Fields left as ``UNSET`` keep their stored value. Setting `description` to
    None clears it. `id` and `active` cannot be changed through this command.
    """

    UPDATABLE_FIELDS: ClassVar[tuple[str, ...]] = ("name", "description")

    name: Unsettable[str] = UNSET
    description: Unsettable[str] = UNSET

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> UpdateCategory:
        """Build the command from raw input, treating absent keys as ``UNSET``.

        Keys other than the updatable fields (`id`, `active`, ...) are ignored.
        """
        return cls(
            **{key: payload[key] for key in cls.UPDATABLE_FIELDS if key in payload}
        )

    def apply_to(self, category: Category) -> Category:
        """Return a copy of `category` with the set fields of this command applied."""
        return replace(
            category,
            name=resolve(self.name, category.name),
            description=resolve(self.description, category.description),
        )
