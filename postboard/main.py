"""Postboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a status code with an empty body
    - Connection pool created on startup and disposed on shutdown (lifespan)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from postboard.api.error_handlers import register_error_handlers
from postboard.api.routes import posts
from postboard.config import get_settings
from postboard.infrastructure.database import close_db, init_db
from postboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Postboard API started")
    yield
    await close_db()
    logger.info("Postboard API shut down")


app = FastAPI(
    title="Postboard API", version="1.0.0", lifespan=lifespan,
    docs_url=None, redoc_url=None, openapi_url=None,
)

register_error_handlers(app)

# posts owns the catch-all path, so it goes last.
app.include_router(posts.router)
