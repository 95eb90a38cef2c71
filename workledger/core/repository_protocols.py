"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - RecordRepository methods run inside a transaction opened by the caller;
      none of them commits
"""

from datetime import datetime
from typing import Protocol

from workledger.core.domain_types import Identity, LedgerEventKind, RecordId
from workledger.core.work_record import WorkRecord, WorkSubmission


class RecordRepository(Protocol):
    """Contract for work record persistence."""
    async def allocate_id(self) -> RecordId: ...
    async def insert(
        self, record_id: RecordId, submission: WorkSubmission, created_at: datetime,
    ) -> WorkRecord: ...
    async def get(self, record_id: RecordId) -> WorkRecord | None: ...
    async def mark_verified(
        self, record_id: RecordId, verifier: Identity, verified_at: datetime,
    ) -> bool: ...
    async def count(self) -> int: ...
    async def append_event(
        self, record_id: RecordId, kind: LedgerEventKind, actor: Identity,
    ) -> None: ...


class VerifierAuthority(Protocol):
    """Authorization collaborator: decides who may verify records."""
    def is_verifier(self, identity: Identity) -> bool: ...
