"""Library API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LibraryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and services initialized on startup via lifespan context manager
    - Seed files loaded only when SEED_DATA_DIR is set

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Services built once and stored on app.state; routes fetch them via dependencies
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from library_api.api.error_handlers import register_error_handlers
from library_api.api.routes import health, librarians, loans, readers
from library_api.config import get_settings
from library_api.infrastructure.database import init_db
from library_api.infrastructure.observability import setup_logging
from library_api.services.container import build_container
from library_api.services.seed_loader import load_seed_data

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
    app.state.services = build_container(manager, settings)
    if settings.seed_data_dir:
        report = await load_seed_data(app.state.services, settings.seed_data_dir)
        logger.info(
            f"Seed data loaded: {report.loaded}, skipped: {report.skipped}",
        )
    logger.info("Library API started")
    yield
    logger.info("Library API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Library API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(librarians.router)
app.include_router(readers.router)
app.include_router(loans.router)

register_error_handlers(app)
