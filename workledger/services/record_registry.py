"""Record Registry: the four public ledger operations.

Invariants:
    - add_record: id = next_id, next_id += 1, record stored unverified; all in one transaction
    - verify_record: Unverified -> Verified exactly once; a second attempt raises AlreadyVerified
    - get_record / get_total_records never mutate state
    - Invalid input is rejected before an id is allocated, so failures never leave gaps
    - Every committed change has exactly one ledger_events row

Design Decisions:
    - Single-writer boundary: each operation runs inside DatabaseSessionManager.transaction()
      (process lock + database transaction)
    - Authority arrives as a boolean computed by the VerifierAuthority collaborator;
      the registry keeps no access-control list
    - Repository injected as a factory so tests can substitute the persistence layer
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from workledger.core.domain_types import LedgerEventKind
from workledger.core.errors import AlreadyVerifiedError, RecordNotFoundError
from workledger.core.repository_protocols import RecordRepository
from workledger.core.work_record import (
    WorkRecord, apply_verification, build_submission,
    check_verifiable, ensure_verifier, parse_record_id,
)
from workledger.infrastructure.database import DatabaseSessionManager
from workledger.services.record_repository import SqlRecordRepository

logger = logging.getLogger(__name__)

RepositoryFactory = Callable[[AsyncSession], RecordRepository]


class RecordRegistry:
    """Owns identifier assignment, record storage and the verification transition."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        repository_factory: RepositoryFactory = SqlRecordRepository,
    ):
        self._db = db
        self._repository_factory = repository_factory

    async def add_record(
        self,
        owner: str,
        employer_name: str,
        title: str,
        description: str,
        start_date: date | str,
        end_date: date | str | None = None,
    ) -> int:
        """Store a new unverified record and return its id."""
        submission = build_submission(
            owner, employer_name, title, description, start_date, end_date,
        )
        async with self._db.transaction() as session:
            repo = self._repository_factory(session)
            record_id = await repo.allocate_id()
            await repo.insert(record_id, submission, datetime.now(timezone.utc))
            await repo.append_event(
                record_id, LedgerEventKind.RECORD_CREATED, submission.owner,
            )
        logger.info(
            "Work record created",
            extra={"record_id": record_id, "identity": submission.owner},
        )
        return record_id

    async def verify_record(
        self, record_id: int | str, verifier: str, authorized: bool,
    ) -> WorkRecord:
        """Mark a record verified by verifier. Returns the updated record."""
        identity = ensure_verifier(verifier, authorized)
        rid = parse_record_id(record_id)
        async with self._db.transaction() as session:
            repo = self._repository_factory(session)
            record = check_verifiable(await repo.get(rid), rid)
            verified_at = datetime.now(timezone.utc)
            if not await repo.mark_verified(rid, identity, verified_at):
                # Row changed between read and write (another process won)
                current = await repo.get(rid)
                raise AlreadyVerifiedError(
                    rid, current.verifier if current else None,
                )
            await repo.append_event(
                rid, LedgerEventKind.RECORD_VERIFIED, identity,
            )
        logger.info(
            "Work record verified",
            extra={"record_id": rid, "identity": identity},
        )
        return apply_verification(record, identity, verified_at)

    async def get_record(self, record_id: int | str) -> WorkRecord:
        """Return the record, or raise RecordNotFoundError."""
        rid = parse_record_id(record_id)
        async with self._db.transaction() as session:
            record = await self._repository_factory(session).get(rid)
        if record is None:
            raise RecordNotFoundError(rid)
        return record

    async def get_total_records(self) -> int:
        """Number of records ever created (== next id to be issued)."""
        async with self._db.transaction() as session:
            return await self._repository_factory(session).count()
