"""Add ledger_events audit table.

Revision ID: 002_ledger_events
Revises: 001_ledger
Create Date: 2026-10-18

One row per committed state change (record_created, record_verified),
written in the same transaction as the change.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_ledger_events"
down_revision: Union[str, None] = "001_ledger"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "ledger_events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "record_id", sa.BigInteger,
            sa.ForeignKey("work_records.id"), nullable=False,
        ),
        sa.Column("kind", sa.String(30), nullable=False),
        sa.Column("actor", sa.String(256), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_ledger_events_record_id", "ledger_events", ["record_id"])


def downgrade() -> None:
    op.drop_index("ix_ledger_events_record_id", table_name="ledger_events")
    op.drop_table("ledger_events")
