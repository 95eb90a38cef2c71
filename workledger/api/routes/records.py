"""Record Routes: HTTP mapping of the four ledger operations.

Invariants:
    - POST /records           -> add_record, 201 {"id": n}
    - POST /records/{id}/verify -> verify_record, 200 updated record
    - GET  /records/{id}      -> get_record
    - GET  /records/total     -> get_total_records (declared before /{record_id})
    - record_id is taken as a raw string so malformed ids surface as RECORD_NOT_FOUND
"""

import logging

from fastapi import APIRouter, Depends, status

from workledger.api.dependencies import (
    get_caller_identity, get_registry, get_verifier_authority,
    require_caller_identity,
)
from workledger.core.domain_types import Identity
from workledger.core.repository_protocols import VerifierAuthority
from workledger.schemas.records import (
    RecordCreate, RecordCreated, TotalRecords, WorkRecordResponse,
)
from workledger.services.record_registry import RecordRegistry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/records", tags=["records"])


@router.post(
    "", response_model=RecordCreated, status_code=status.HTTP_201_CREATED,
)
async def add_record(
    body: RecordCreate,
    owner: Identity = Depends(require_caller_identity),
    registry: RecordRegistry = Depends(get_registry),
):
    """Submit a work-history claim owned by the calling identity."""
    record_id = await registry.add_record(
        owner,
        body.employer_name,
        body.title,
        body.description,
        body.start_date,
        body.end_date,
    )
    return RecordCreated(id=record_id)


@router.get("/total", response_model=TotalRecords)
async def get_total_records(registry: RecordRegistry = Depends(get_registry)):
    """Count of records ever created."""
    return TotalRecords(total_records=await registry.get_total_records())


@router.get("/{record_id}", response_model=WorkRecordResponse)
async def get_record(
    record_id: str, registry: RecordRegistry = Depends(get_registry),
):
    record = await registry.get_record(record_id)
    return WorkRecordResponse.from_record(record)


@router.post("/{record_id}/verify", response_model=WorkRecordResponse)
async def verify_record(
    record_id: str,
    verifier: Identity | None = Depends(get_caller_identity),
    authority: VerifierAuthority = Depends(get_verifier_authority),
    registry: RecordRegistry = Depends(get_registry),
):
    """Authenticate a record. Caller must hold verifier capability."""
    authorized = verifier is not None and authority.is_verifier(verifier)
    record = await registry.verify_record(record_id, verifier or "", authorized)
    return WorkRecordResponse.from_record(record)
