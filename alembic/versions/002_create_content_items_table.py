"""Create content_items table

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 00:00:01.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # One row per item of every marketing collection
    op.create_table(
        "content_items",
        sa.Column("seq", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("pk", sa.String(), nullable=False),
        sa.Column("collection", sa.String(), nullable=False),
        sa.Column("data", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("seq"),
    )
    op.create_index(op.f("ix_content_items_pk"), "content_items", ["pk"], unique=True)
    op.create_index(
        op.f("ix_content_items_collection"),
        "content_items",
        ["collection"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_content_items_collection"), table_name="content_items")
    op.drop_index(op.f("ix_content_items_pk"), table_name="content_items")
    op.drop_table("content_items")
