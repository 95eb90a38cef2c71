"""Work Ledger API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LedgerError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event
    - Schema bootstrap on startup is opt-out (DATABASE_AUTO_CREATE=false when alembic owns it)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workledger import __version__
from workledger.api.error_handlers import register_error_handlers
from workledger.api.routes import health, records
from workledger.config import get_settings
from workledger.infrastructure.database import init_db
from workledger.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_schema()
    logger.info(
        f"Work Ledger API started ({len(settings.verifier_identities)} verifier identities)",
    )
    yield
    await manager.dispose()
    logger.info("Work Ledger API shutting down")


app = FastAPI(
    title="Work Ledger API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(records.router)

register_error_handlers(app)
