"""Initial ledger schema: work_records and the seeded ledger_counter.

Revision ID: 001_ledger
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_ledger"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "work_records",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=False),
        sa.Column("owner", sa.String(256), nullable=False),
        sa.Column("employer_name", sa.String(200), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("start_date", sa.Date, nullable=False),
        sa.Column("end_date", sa.Date, nullable=True),
        sa.Column("verified", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("verifier", sa.String(256), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_work_records_owner", "work_records", ["owner"])

    counter = op.create_table(
        "ledger_counter",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("next_id", sa.BigInteger, nullable=False, server_default="0"),
    )
    op.bulk_insert(counter, [{"id": 1, "next_id": 0}])


def downgrade() -> None:
    op.drop_table("ledger_counter")
    op.drop_index("ix_work_records_owner", table_name="work_records")
    op.drop_table("work_records")
