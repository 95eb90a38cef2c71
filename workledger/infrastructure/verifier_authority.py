"""Verifier Authority: allowlist implementation of the authorization collaborator.

Invariants:
    - is_verifier() is a pure membership test, no IO
    - Blank identities never hold verifier capability
"""

from collections.abc import Iterable

from workledger.core.domain_types import Identity


class AllowlistVerifierAuthority:
    """Grants verifier capability to a fixed set of identities."""

    def __init__(self, identities: Iterable[str]):
        self._identities = frozenset(
            i.strip() for i in identities if i and i.strip()
        )

    def is_verifier(self, identity: Identity) -> bool:
        return bool(identity) and identity.strip() in self._identities

    def __len__(self) -> int:
        return len(self._identities)
