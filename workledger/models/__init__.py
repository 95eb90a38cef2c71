"""ORM Models: SQLAlchemy declarative models for ledger state.

Invariants:
    - All models inherit from Base (db/base.py)
    - work_records rows are never deleted; ledger_counter holds exactly one row

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from workledger.models.work_record import WorkRecordModel  # noqa: F401
from workledger.models.ledger_counter import LedgerCounter  # noqa: F401
from workledger.models.ledger_event import LedgerEvent  # noqa: F401
