"""Category manager: the use-cases of the category catalog.

Every operation performs at most one read followed by at most one write
against the category store. The two calls are independent (no transaction);
the read always completes before the write starts. Store errors are never
caught here and reach the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quitanda.domain.errors import CategoryNotFoundError
from quitanda.interfaces.category_store import SortDirection

if TYPE_CHECKING:
    from quitanda.domain.category import Category
    from quitanda.interfaces.category_store import CategoryStore
    from quitanda.interfaces.notifier import EventNotifier

    from .commands import CreateCategory, UpdateCategory
    from .context import CallerContext

# pylint: disable=unused-argument

logger = logging.getLogger(__name__)

BY_NAME = {"name": SortDirection.ASC}


class CategoryManager:
    """Lists, retrieves, creates, updates and soft-deletes categories.

    Args:
        store: Record store holding the categories.
        notifier: Fire-and-forget event sink. Held for domain notifications;
            none of the current operations emit.
    """

    def __init__(self, store: CategoryStore, notifier: EventNotifier) -> None:
        self.store = store
        self.notifier = notifier

    # --------------------------------------------------------------------- #
    # Queries
    # --------------------------------------------------------------------- #

    async def list_public_categories(self) -> list[Category]:
        """Return the active categories, ordered by name."""
        categories = await self.store.find_many(
            where={"active": True}, order_by=BY_NAME
        )
        logger.debug("Listed %d public categories", len(categories))
        return categories

    async def list_categories(self) -> list[Category]:
        """Return every category (active or not), ordered by name."""
        categories = await self.store.find_many(order_by=BY_NAME)
        logger.debug("Listed %d categories", len(categories))
        return categories

    async def get_category_by_id(self, category_id: str) -> Category:
        """Return the category with the given id, whatever its active state.

        Raises:
            CategoryNotFoundError: If no category has that id.
        """
        category = await self.store.find_one(where={"id": category_id})
        if category is None:
            logger.debug("Category %s not found", category_id)
            raise CategoryNotFoundError(category_id)
        return category

    # --------------------------------------------------------------------- #
    # Commands
    # --------------------------------------------------------------------- #

    async def create_category(self, cmd: CreateCategory) -> Category:
        """Create and persist a new, active category."""
        category = self.store.instantiate(
            {"name": cmd.name, "description": cmd.description, "active": True}
        )
        created = await self.store.persist(category)
        logger.debug("Created category %s (%s)", created.id, created.name)
        return created

    async def update_category(
        self, context: CallerContext, category_id: str, cmd: UpdateCategory
    ) -> Category:
        """Merge the set fields of `cmd` onto an existing category and persist it.

        Raises:
            CategoryNotFoundError: If no category has that id. Nothing is written.
        """
        current = await self.get_category_by_id(category_id)
        updated = await self.store.persist(cmd.apply_to(current))
        logger.debug("Updated category %s", category_id)
        return updated

    async def delete_category(self, context: CallerContext, category_id: str) -> None:
        """Soft-delete a category by marking it inactive.

        Deleting an already inactive category succeeds and changes nothing.

        Raises:
            CategoryNotFoundError: If no category has that id. Nothing is written.
        """
        category = await self.get_category_by_id(category_id)
        category.deactivate()
        await self.store.persist(category)
        logger.debug("Deactivated category %s", category_id)
