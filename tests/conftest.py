"""Root conftest: shared test configuration and ledger database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the counter seeded
    - Settings never read a developer .env pointing at a real database

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for registry semantics
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_AUTO_CREATE", "false")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from workledger.infrastructure.database import DatabaseSessionManager  # noqa: E402
from workledger.services.record_registry import RecordRegistry  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    manager = DatabaseSessionManager.from_engine(test_engine)
    await manager.create_schema()
    return manager


@pytest.fixture
def registry(db_manager):
    return RecordRegistry(db_manager)


@pytest.fixture
def acme_submission():
    """Arguments of the canonical Acme/Engineer submission."""
    return {
        "owner": "alice",
        "employer_name": "Acme",
        "title": "Engineer",
        "description": "Built the billing pipeline.",
        "start_date": "2020-01-01",
        "end_date": "2021-01-01",
    }
