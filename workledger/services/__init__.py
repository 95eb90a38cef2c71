"""Services Layer: orchestrates IO around the pure core.

Invariants:
    - Every public registry operation runs inside DatabaseSessionManager.transaction()
    - Services raise core errors only; HTTP mapping happens in api/
"""
