"""Record Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - RecordCreate text fields are stripped and non-empty; lengths match core limits
    - Dates are YYYY-MM-DD strings only (no timestamps, datetimes or basic format);
      end_date omitted means ongoing
    - WorkRecordResponse mirrors core WorkRecord, never the ORM row

Design Decisions:
    - field_validator for side-effect-free transforms (strip)
    - end_date >= start_date checked in core (build_submission), one rule in one place
"""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from workledger.core.domain_types import (
    ISO_DATE_PATTERN, MAX_DESCRIPTION_LENGTH, MAX_EMPLOYER_NAME_LENGTH,
    MAX_TITLE_LENGTH, RecordState,
)
from workledger.core.work_record import WorkRecord


class RecordCreate(BaseModel):
    """Work record submission. The owner comes from the identity header, not the body."""
    employer_name: str = Field(min_length=1, max_length=MAX_EMPLOYER_NAME_LENGTH)
    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    description: str = Field(min_length=1, max_length=MAX_DESCRIPTION_LENGTH)
    start_date: date
    end_date: date | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def require_iso_date(cls, v: object) -> object:
        if v is None:
            return v
        if not isinstance(v, str) or not ISO_DATE_PATTERN.fullmatch(v):
            raise ValueError("date must be a YYYY-MM-DD string")
        return date.fromisoformat(v)

    @field_validator("employer_name", "title", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v


class RecordCreated(BaseModel):
    id: int


class TotalRecords(BaseModel):
    total_records: int


class WorkRecordResponse(BaseModel):
    """Public view of a stored work record."""
    id: int
    owner: str
    employer_name: str
    title: str
    description: str
    start_date: date
    end_date: date | None
    verified: bool
    verifier: str | None
    state: RecordState
    created_at: datetime | None
    verified_at: datetime | None

    @classmethod
    def from_record(cls, record: WorkRecord) -> "WorkRecordResponse":
        return cls(
            id=record.id,
            owner=record.owner,
            employer_name=record.employer_name,
            title=record.title,
            description=record.description,
            start_date=record.start_date,
            end_date=record.end_date,
            verified=record.verified,
            verifier=record.verifier,
            state=record.state,
            created_at=record.created_at,
            verified_at=record.verified_at,
        )
