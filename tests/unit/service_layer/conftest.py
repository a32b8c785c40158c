"""Pytest fixtures for category manager unit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from quitanda.adapters.category_store import InMemoryCategoryStore
from quitanda.adapters.notifiers import InMemoryNotifier
from quitanda.bootstrap.bootstrap import build_category_manager
from quitanda.domain.category import Category
from quitanda.service_layer.category_manager import CategoryManager

# pylint: disable=redefined-outer-name


class RecordingStore(InMemoryCategoryStore):
    """In-memory store that also counts persist calls."""

    def __init__(self, categories: Iterable[Category] = ()) -> None:
        super().__init__(categories)
        self.persisted: list[Category] = []

    async def persist(self, category: Category) -> Category:
        stored = await super().persist(category)
        self.persisted.append(stored)
        return stored


@pytest.fixture
def make_test_manager() -> Callable[..., CategoryManager]:
    """Factory creating a manager over a recording store and notifier."""

    def _make(categories: Iterable[Category] = ()) -> CategoryManager:
        return build_category_manager(
            store=RecordingStore(categories), notifier=InMemoryNotifier()
        )

    return _make
