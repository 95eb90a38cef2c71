"""Health probes and infrastructure error mapping.

Tests:
    - Liveness always 200
    - Readiness 200 with a reachable DB, 503 without one
    - DatabaseError from the registry becomes a 503 envelope
"""

import workledger.infrastructure.database as db_module
from workledger.api.dependencies import get_registry
from workledger.core.errors import DatabaseError
from workledger.main import app


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client):
    db_module.db_manager = None

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_database_error_renders_503_envelope(client):
    class _DownRegistry:
        async def get_total_records(self):
            raise DatabaseError("Connection or operational error", "execute")

    app.dependency_overrides[get_registry] = lambda: _DownRegistry()

    res = await client.get("/api/v1/records/total")

    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["severity"] == "critical"
