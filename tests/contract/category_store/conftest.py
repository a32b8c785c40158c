"""Fixtures for CategoryStore contract tests."""

from __future__ import annotations

import pytest

from quitanda.adapters.category_store import (
    InMemoryCategoryStore,
    SqlAlchemyCategoryStore,
)
from quitanda.interfaces.category_store import CategoryStore


@pytest.fixture(params=["memory", "sqlite", "postgres"])
def category_store(request: pytest.FixtureRequest) -> CategoryStore:
    """Return a fresh, empty CategoryStore for the requested backend.

    Supported params:
      - `"memory"` → InMemoryCategoryStore
      - `"sqlite"` → SqlAlchemyCategoryStore over aiosqlite (temp file)
      - `"postgres"` → SqlAlchemyCategoryStore over asyncpg (Testcontainers;
        skipped when Docker is unavailable)
    """
    match request.param:
        case "memory":
            return InMemoryCategoryStore()
        case "sqlite":
            return SqlAlchemyCategoryStore(request.getfixturevalue("sqlite_engine"))
        case "postgres":
            return SqlAlchemyCategoryStore(request.getfixturevalue("postgres_engine"))
        case _:
            raise ValueError(f"unknown category store type: {request.param}")


@pytest.fixture(params=["sqlite", "postgres"])
def sql_category_store(request: pytest.FixtureRequest) -> SqlAlchemyCategoryStore:
    """SQL-backed stores only, for constraints enforced by the database schema."""
    engine = request.getfixturevalue(f"{request.param}_engine")
    return SqlAlchemyCategoryStore(engine)
