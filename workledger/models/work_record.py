"""WorkRecord ORM: persists one work-history claim.

Invariants:
    - id is issued by the ledger counter, never by the database
    - owner, employer_name, title, description, start_date, end_date written once at insert
    - verified/verifier/verified_at written once, by the conditional verify UPDATE

Design Decisions:
    - BigInteger id with autoincrement disabled: the counter row is the only id source
    - Indexed owner: lookup of a person's history without a full scan
"""

from datetime import date, datetime, timezone

from sqlalchemy import BigInteger, Boolean, Date, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from workledger.db.base import Base


class WorkRecordModel(Base):
    """Work record row: immutable claim fields plus the one-way verification flag."""
    __tablename__ = "work_records"

    id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False,
    )
    owner: Mapped[str] = mapped_column(String(256), nullable=False, index=True)
    employer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    verifier: Mapped[str | None] = mapped_column(String(256), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    verified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
