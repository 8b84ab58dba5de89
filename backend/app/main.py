"""Benefits API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BenefitsError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The lifespan owns the DatabaseSessionManager: built on startup, stored on
      app.state.db_manager, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers: BenefitsError (domain), RequestValidationError
      (Pydantic), Exception (catch-all)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import benefits, health
from app.config import get_settings
from app.infrastructure.benefit_repository import SqlAlchemyBenefitRepository
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging
from app.services.seed_benefits import seed_benefits

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await db_manager.create_all()
    if settings.database_seed:
        async with db_manager.session() as db:
            await seed_benefits(SqlAlchemyBenefitRepository(db))
    app.state.db_manager = db_manager
    logger.info("Benefits API started")
    yield
    logger.info("Benefits API shutting down")
    await db_manager.close()
    app.state.db_manager = None


app = FastAPI(
    title="Benefits API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(benefits.router)

register_error_handlers(app)
