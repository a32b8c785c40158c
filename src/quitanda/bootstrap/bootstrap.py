"""Assemble a CategoryManager from a store and a notifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from quitanda import config
from quitanda.adapters.category_store import SqlAlchemyCategoryStore
from quitanda.adapters.db.engine import make_engine
from quitanda.adapters.notifiers import LoggingNotifier
from quitanda.service_layer.category_manager import CategoryManager

if TYPE_CHECKING:
    from quitanda.interfaces.category_store import CategoryStore
    from quitanda.interfaces.notifier import EventNotifier


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    category_manager: CategoryManager


def build_category_store(url: str) -> CategoryStore:
    """Build a SQL-backed category store for the database at `url`."""
    engine = make_engine(url)
    return SqlAlchemyCategoryStore(engine)


def build_category_manager(
    store: CategoryStore, notifier: EventNotifier
) -> CategoryManager:
    """Build a category manager with injected dependencies."""
    return CategoryManager(store=store, notifier=notifier)


def bootstrap(
    store: CategoryStore | None = None, notifier: EventNotifier | None = None
) -> AppContainer:
    """Bootstrap the category manager.

    Without an explicit `store`, a SQL store is built from ``QUITANDA_DB_URL``
    (raises `config.DatabaseUrlNotSetError` when unset). The default notifier
    logs events.
    """
    if store is None:
        store = build_category_store(config.get_db_url())
    if notifier is None:
        notifier = LoggingNotifier()

    return AppContainer(
        category_manager=build_category_manager(store, notifier),
    )
