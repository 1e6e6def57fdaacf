"""Create leads and counselors tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "leads",
        sa.Column("seq", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("pk", sa.String(), nullable=False),
        sa.Column("lead_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("destination", sa.String(), nullable=True),
        sa.Column("program", sa.String(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("counselor", sa.String(), nullable=True),
        sa.Column("counselor_id", sa.String(), nullable=True),
        sa.Column("counselor_name", sa.String(), nullable=True),
        sa.Column("last_contact", sa.String(), nullable=True),
        sa.Column("documents", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("seq"),
    )
    op.create_index(op.f("ix_leads_pk"), "leads", ["pk"], unique=True)
    op.create_index(op.f("ix_leads_lead_id"), "leads", ["lead_id"], unique=True)
    # Not unique: phone lookups return the oldest match
    op.create_index(op.f("ix_leads_phone"), "leads", ["phone"], unique=False)

    op.create_table(
        "counselors",
        sa.Column("seq", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("pk", sa.String(), nullable=False),
        sa.Column("counselor_id", sa.Integer(), nullable=True),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("designation", sa.String(), nullable=True),
        sa.Column("profile_image", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("seq"),
    )
    op.create_index(op.f("ix_counselors_pk"), "counselors", ["pk"], unique=True)
    op.create_index(op.f("ix_counselors_counselor_id"), "counselors", ["counselor_id"], unique=False)
    op.create_index(op.f("ix_counselors_username"), "counselors", ["username"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_counselors_username"), table_name="counselors")
    op.drop_index(op.f("ix_counselors_counselor_id"), table_name="counselors")
    op.drop_index(op.f("ix_counselors_pk"), table_name="counselors")
    op.drop_table("counselors")
    op.drop_index(op.f("ix_leads_phone"), table_name="leads")
    op.drop_index(op.f("ix_leads_lead_id"), table_name="leads")
    op.drop_index(op.f("ix_leads_pk"), table_name="leads")
    op.drop_table("leads")
