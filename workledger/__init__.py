"""Work Ledger: registry of professional work-history records.

Invariants:
    - Package root holds only metadata (import side-effects prohibited)
"""

__version__ = "1.0.0"
