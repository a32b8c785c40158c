"""Category table schema.

Defines the ``categories`` table backing `SqlAlchemyCategoryStore`. Rows are
never deleted: soft deletion flips ``active`` to false.

| Constraint / index          | Purpose                                 |
|-----------------------------|-----------------------------------------|
| PRIMARY KEY(id)             | one row per category id                 |
| CHECK(length(name) >= 1)    | names are non-empty display strings     |
| INDEX(active, name)         | public (active-only) listing by name    |
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Index,
    String,
    Table,
    Text,
    true,
)

from quitanda.adapters.db.metadata import metadata

__all__ = ["categories"]

ID_LENGTH = 36  # fits ULIDs (26) and UUID strings (36)
NAME_LENGTH = 120

categories = Table(
    "categories",
    metadata,
    Column(
        "id",
        String(ID_LENGTH),
        primary_key=True,
        comment="Opaque category id assigned by the store on insert.",
    ),
    Column(
        "name",
        String(NAME_LENGTH),
        nullable=False,
        comment="Display name; listings are ordered by it.",
    ),
    Column(
        "description",
        Text,
        nullable=True,
        comment="Optional free-text description.",
    ),
    Column(
        "active",
        Boolean,
        nullable=False,
        server_default=true(),
        comment="False once the category has been soft-deleted.",
    ),
    CheckConstraint("length(name) >= 1", name="name_not_empty"),
    Index(None, "active", "name"),
    comment="Catalog categories. Soft-deleted rows stay with active = false.",
)
