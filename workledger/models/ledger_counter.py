"""LedgerCounter ORM: the single next_id / total_records counter.

Invariants:
    - Exactly one row, id == COUNTER_ROW_ID, seeded with next_id = 0
    - next_id only ever increases, in the same transaction as the record insert
"""

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column

from workledger.db.base import Base

COUNTER_ROW_ID = 1


class LedgerCounter(Base):
    """Identifier source and record count for the whole ledger."""
    __tablename__ = "ledger_counter"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    next_id: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
