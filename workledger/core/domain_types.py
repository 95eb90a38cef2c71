"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps a non-negative int, never reused once issued
    - Identity wraps the caller string handed over by the identity collaborator
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", int)
Identity = NewType("Identity", str)


# ─── Limits ──────────────────────────────────────────────────────

# Largest id storable in a signed 64-bit BIGINT column
MAX_RECORD_ID = 2**63 - 1

MAX_OWNER_LENGTH = 256
MAX_EMPLOYER_NAME_LENGTH = 200
MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 5000

# Calendar dates are accepted only in extended ISO-8601 form
ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


# ─── Enums ───────────────────────────────────────────────────────

class RecordState(str, Enum):
    """WorkRecord lifecycle. VERIFIED is terminal."""
    UNVERIFIED = "unverified"
    VERIFIED = "verified"


class LedgerEventKind(str, Enum):
    """Audit event kinds, one per committed state change."""
    RECORD_CREATED = "record_created"
    RECORD_VERIFIED = "record_verified"
