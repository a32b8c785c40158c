"""Create categories table

Revision ID: 5c1f7e2a9d04
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "5c1f7e2a9d04"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "categories",
        sa.Column(
            "id",
            sa.String(length=36),
            nullable=False,
            comment="Opaque category id assigned by the store on insert.",
        ),
        sa.Column(
            "name",
            sa.String(length=120),
            nullable=False,
            comment="Display name; listings are ordered by it.",
        ),
        sa.Column(
            "description",
            sa.Text(),
            nullable=True,
            comment="Optional free-text description.",
        ),
        sa.Column(
            "active",
            sa.Boolean(),
            server_default=sa.true(),
            nullable=False,
            comment="False once the category has been soft-deleted.",
        ),
        sa.CheckConstraint(
            "length(name) >= 1", name=op.f("ck_categories_name_not_empty")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_categories")),
        comment="Catalog categories. Soft-deleted rows stay with active = false.",
    )
    op.create_index(
        op.f("ix_categories_active_name"),
        "categories",
        ["active", "name"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_categories_active_name"), table_name="categories")
    op.drop_table("categories")
