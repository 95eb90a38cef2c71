"""LedgerEvent ORM: append-only audit row for every committed state change.

Invariants:
    - Written in the same transaction as the change it describes
    - Never updated or deleted

Design Decisions:
    - Audit table, not enforcement: no business rule reads it back
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from workledger.db.base import Base


class LedgerEvent(Base):
    """Audit entry: who did what to which record, and when."""
    __tablename__ = "ledger_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    record_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("work_records.id"), nullable=False, index=True,
    )
    kind: Mapped[str] = mapped_column(String(30), nullable=False)
    actor: Mapped[str] = mapped_column(String(256), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
