"""Category store adapters: in-memory and SQLAlchemy (asyncio) implementations."""

from .memory import InMemoryCategoryStore
from .sqlalchemy_store import SqlAlchemyCategoryStore

__all__ = ["InMemoryCategoryStore", "SqlAlchemyCategoryStore"]
