"""Category entity."""

from __future__ import annotations

from dataclasses import dataclass

CATEGORY_FIELDS = ("id", "name", "description", "active")


@dataclass(slots=True)
class Category:
    """A catalog grouping of products (e.g. "Frutas", "Verduras").

    Conventions:
      - `id` is an opaque string assigned by the store on first persist; it is
        `None` only for a record that has been instantiated but not persisted.
      - `active` is the only lifecycle flag. A soft-deleted category keeps its
        row and has `active` set to False.
    """

    id: str | None
    name: str
    description: str | None = None
    active: bool = True

    @property
    def is_persisted(self) -> bool:
        """Whether the category has been assigned an id by a store."""
        return self.id is not None

    def deactivate(self) -> None:
        """Mark the category as soft-deleted. Other fields are left untouched."""
        self.active = False
