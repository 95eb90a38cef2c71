"""SQLAlchemy Record Repository: RecordRepository protocol over one AsyncSession.

Invariants:
    - Never commits: the caller's transaction decides the outcome
    - allocate_id() reads and bumps the counter row in one locked step
    - mark_verified() only touches rows with verified = false

Design Decisions:
    - Conditional UPDATE for verification: the database, not a prior read,
      decides which concurrent verifier wins
    - with_for_update() on the counter row: row lock on PostgreSQL, no-op on SQLite
"""

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from workledger.core.domain_types import Identity, LedgerEventKind, RecordId
from workledger.core.work_record import WorkRecord, WorkSubmission
from workledger.models.ledger_counter import COUNTER_ROW_ID, LedgerCounter
from workledger.models.ledger_event import LedgerEvent
from workledger.models.work_record import WorkRecordModel


def to_domain(row: WorkRecordModel) -> WorkRecord:
    """Map an ORM row to the frozen core value object."""
    return WorkRecord(
        id=RecordId(row.id),
        owner=Identity(row.owner),
        employer_name=row.employer_name,
        title=row.title,
        description=row.description,
        start_date=row.start_date,
        end_date=row.end_date,
        verified=row.verified,
        verifier=Identity(row.verifier) if row.verifier is not None else None,
        created_at=row.created_at,
        verified_at=row.verified_at,
    )


class SqlRecordRepository:
    """Work record persistence for a single unit of work."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def _counter(self) -> LedgerCounter:
        result = await self._db.execute(
            select(LedgerCounter)
            .where(LedgerCounter.id == COUNTER_ROW_ID)
            .with_for_update(),
        )
        counter = result.scalar_one_or_none()
        if counter is None:
            # Schema created without the seed row (e.g. bare metadata.create_all)
            counter = LedgerCounter(id=COUNTER_ROW_ID, next_id=0)
            self._db.add(counter)
            await self._db.flush()
        return counter

    async def allocate_id(self) -> RecordId:
        counter = await self._counter()
        record_id = RecordId(counter.next_id)
        counter.next_id = counter.next_id + 1
        await self._db.flush()
        return record_id

    async def insert(
        self, record_id: RecordId, submission: WorkSubmission, created_at: datetime,
    ) -> WorkRecord:
        row = WorkRecordModel(
            id=record_id,
            owner=submission.owner,
            employer_name=submission.employer_name,
            title=submission.title,
            description=submission.description,
            start_date=submission.start_date,
            end_date=submission.end_date,
            verified=False,
            verifier=None,
            created_at=created_at,
            verified_at=None,
        )
        self._db.add(row)
        await self._db.flush()
        return to_domain(row)

    async def get(self, record_id: RecordId) -> WorkRecord | None:
        result = await self._db.execute(
            select(WorkRecordModel)
            .where(WorkRecordModel.id == record_id)
            .execution_options(populate_existing=True),
        )
        row = result.scalar_one_or_none()
        return to_domain(row) if row is not None else None

    async def mark_verified(
        self, record_id: RecordId, verifier: Identity, verified_at: datetime,
    ) -> bool:
        result = await self._db.execute(
            update(WorkRecordModel)
            .where(
                WorkRecordModel.id == record_id,
                WorkRecordModel.verified.is_(False),
            )
            .values(verified=True, verifier=verifier, verified_at=verified_at)
            .execution_options(synchronize_session=False),
        )
        return result.rowcount == 1

    async def count(self) -> int:
        result = await self._db.execute(
            select(LedgerCounter.next_id).where(LedgerCounter.id == COUNTER_ROW_ID),
        )
        next_id = result.scalar_one_or_none()
        return next_id if next_id is not None else 0

    async def append_event(
        self, record_id: RecordId, kind: LedgerEventKind, actor: Identity,
    ) -> None:
        self._db.add(LedgerEvent(record_id=record_id, kind=kind.value, actor=actor))
        await self._db.flush()
