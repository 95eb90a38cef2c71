"""API test fixtures: FastAPI test client over the in-memory ledger.

Invariants:
    - get_db_manager overridden to the per-test DatabaseSessionManager
    - Module-level db_manager patched for the readiness probe
    - Verifier allowlist is exactly the verifier fixture

Design Decisions:
    - Lifespan does not run under ASGITransport; fixtures do its wiring
"""

import pytest
from httpx import ASGITransport, AsyncClient

import workledger.infrastructure.database as db_module
from workledger.api.dependencies import get_verifier_authority
from workledger.infrastructure.database import get_db_manager
from workledger.infrastructure.verifier_authority import AllowlistVerifierAuthority
from workledger.main import app


@pytest.fixture
def verifier():
    return "verifier-v"


@pytest.fixture
async def client(db_manager, verifier):
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    app.dependency_overrides[get_verifier_authority] = (
        lambda: AllowlistVerifierAuthority([verifier])
    )
    original_manager = db_module.db_manager
    db_module.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def record_body():
    return {
        "employer_name": "Acme",
        "title": "Engineer",
        "description": "Built the billing pipeline.",
        "start_date": "2020-01-01",
        "end_date": "2021-01-01",
    }
