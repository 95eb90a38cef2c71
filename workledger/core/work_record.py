"""Work Record: value objects, creation validation and the verification transition.

Invariants:
    - WorkRecord is frozen: owner, employer_name, title, description and dates never change
    - verified starts False and only apply_verification() produces a verified copy
    - end_date is None (ongoing) or >= start_date
    - parse_record_id() maps every never-issuable id (negative, malformed, zero-padded,
      overflow) to NotFound

Design Decisions:
    - Pure functions only: the registry (shell) does IO around these checks
    - ensure_verifier() runs before any record lookup
"""

from dataclasses import dataclass, replace
from datetime import date, datetime

from workledger.core.domain_types import (
    Identity, RecordId, RecordState, ISO_DATE_PATTERN, MAX_RECORD_ID,
    MAX_OWNER_LENGTH, MAX_EMPLOYER_NAME_LENGTH,
    MAX_TITLE_LENGTH, MAX_DESCRIPTION_LENGTH,
)
from workledger.core.errors import (
    AlreadyVerifiedError, InvalidInputError,
    RecordNotFoundError, UnauthorizedError,
)


@dataclass(frozen=True)
class WorkSubmission:
    """Validated creation arguments, ready to be stored under a fresh id."""
    owner: Identity
    employer_name: str
    title: str
    description: str
    start_date: date
    end_date: date | None = None


@dataclass(frozen=True)
class WorkRecord:
    """A stored unit of work history."""
    id: RecordId
    owner: Identity
    employer_name: str
    title: str
    description: str
    start_date: date
    end_date: date | None = None
    verified: bool = False
    verifier: Identity | None = None
    created_at: datetime | None = None
    verified_at: datetime | None = None

    @property
    def state(self) -> RecordState:
        return RecordState.VERIFIED if self.verified else RecordState.UNVERIFIED

    @property
    def ongoing(self) -> bool:
        return self.end_date is None


# ─── Identifiers ─────────────────────────────────────────────────

def parse_record_id(raw: object) -> RecordId:
    """Coerce a caller-supplied id, raising RecordNotFoundError if it can never exist."""
    if isinstance(raw, bool):
        raise RecordNotFoundError(raw)
    if isinstance(raw, int):
        value = raw
    elif (
        isinstance(raw, str) and raw.isascii() and raw.isdigit()
        and (raw == "0" or not raw.startswith("0"))
    ):
        value = int(raw)
    else:
        raise RecordNotFoundError(raw)
    if value < 0 or value > MAX_RECORD_ID:
        raise RecordNotFoundError(raw)
    return RecordId(value)


# ─── Creation ────────────────────────────────────────────────────

def build_submission(
    owner: str,
    employer_name: str,
    title: str,
    description: str,
    start_date: date | str,
    end_date: date | str | None = None,
) -> WorkSubmission:
    """Validate creation arguments. Raises InvalidInputError on the first bad field."""
    start = _parse_date(start_date, "start_date")
    end = _parse_date(end_date, "end_date") if end_date is not None else None
    if end is not None and end < start:
        raise InvalidInputError(
            f"end_date {end.isoformat()} is earlier than start_date {start.isoformat()}",
            "end_date",
        )
    return WorkSubmission(
        owner=Identity(_require_text(owner, "owner", MAX_OWNER_LENGTH)),
        employer_name=_require_text(
            employer_name, "employer_name", MAX_EMPLOYER_NAME_LENGTH,
        ),
        title=_require_text(title, "title", MAX_TITLE_LENGTH),
        description=_require_text(
            description, "description", MAX_DESCRIPTION_LENGTH,
        ),
        start_date=start,
        end_date=end,
    )


def _require_text(value: object, field: str, max_length: int) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{field} must be a string", field)
    if not value.strip():
        raise InvalidInputError(f"{field} cannot be empty or whitespace", field)
    if len(value) > max_length:
        raise InvalidInputError(
            f"{field} exceeds {max_length} characters", field,
        )
    return value


def _parse_date(value: object, field: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if not ISO_DATE_PATTERN.fullmatch(text):
                raise ValueError(text)
            return date.fromisoformat(text)
        except ValueError:
            raise InvalidInputError(
                f"{field} '{value}' is not an ISO-8601 date (YYYY-MM-DD)", field,
            ) from None
    raise InvalidInputError(f"{field} must be a date", field)


# ─── Verification ────────────────────────────────────────────────

def ensure_verifier(verifier: str | None, authorized: bool) -> Identity:
    """Return the verifier identity, or raise UnauthorizedError if it lacks capability."""
    if not isinstance(verifier, str) or not verifier.strip():
        raise UnauthorizedError("Caller identity is required to verify records")
    if not authorized:
        raise UnauthorizedError(
            f"'{verifier}' does not hold verifier capability", identity=verifier,
        )
    return Identity(verifier.strip())


def check_verifiable(record: WorkRecord | None, record_id: RecordId) -> WorkRecord:
    """Enforce the Unverified -> Verified preconditions. Returns the record on success."""
    if record is None:
        raise RecordNotFoundError(record_id)
    if record.verified:
        raise AlreadyVerifiedError(record_id, record.verifier)
    return record


def apply_verification(
    record: WorkRecord, verifier: Identity, verified_at: datetime,
) -> WorkRecord:
    """Return the verified copy of record. Only verified/verifier/verified_at change."""
    if record.verified:
        raise AlreadyVerifiedError(record.id, record.verifier)
    return replace(
        record, verified=True, verifier=verifier, verified_at=verified_at,
    )
