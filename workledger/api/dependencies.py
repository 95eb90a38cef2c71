"""Request Dependencies: identity, authority and registry wiring for routes.

Invariants:
    - Caller identity is read only from the configured header, stripped; blank means absent
    - require_caller_identity raises UnauthorizedError, never returns an empty identity
    - A fresh RecordRegistry per request, sharing the process-wide DatabaseSessionManager

Design Decisions:
    - Collaborators exposed as dependencies so tests swap them via dependency_overrides
"""

from fastapi import Depends, Request

from workledger.config import Settings, get_settings
from workledger.core.domain_types import Identity
from workledger.core.errors import UnauthorizedError
from workledger.core.repository_protocols import VerifierAuthority
from workledger.infrastructure.database import DatabaseSessionManager, get_db_manager
from workledger.infrastructure.verifier_authority import AllowlistVerifierAuthority
from workledger.services.record_registry import RecordRegistry


def get_caller_identity(
    request: Request, settings: Settings = Depends(get_settings),
) -> Identity | None:
    raw = request.headers.get(settings.identity_header, "").strip()
    return Identity(raw) if raw else None


def require_caller_identity(
    identity: Identity | None = Depends(get_caller_identity),
    settings: Settings = Depends(get_settings),
) -> Identity:
    if identity is None:
        raise UnauthorizedError(
            f"Caller identity required ({settings.identity_header} header)",
        )
    return identity


def get_verifier_authority(
    settings: Settings = Depends(get_settings),
) -> VerifierAuthority:
    return AllowlistVerifierAuthority(settings.verifier_identities)


def get_registry(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> RecordRegistry:
    return RecordRegistry(db)
