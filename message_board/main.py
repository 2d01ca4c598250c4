"""Message Board API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MessageBoardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and Transform client initialized on startup, released on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - SQLite databases get their tables created at startup; Postgres is migrated by alembic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from message_board.api.error_handlers import register_error_handlers
from message_board.api.routes import health, messages
from message_board.config import get_settings
from message_board.infrastructure.database import init_db
from message_board.infrastructure.observability import setup_logging
from message_board.infrastructure.transform_client import (
    init_transform_client, close_transform_client,
)

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
    if settings.database_url.startswith("sqlite"):
        await manager.create_all()
    init_transform_client(
        settings.transform_service_url,
        timeout_seconds=settings.transform_timeout_seconds,
        max_retries=settings.transform_max_retries,
        base_delay_ms=settings.transform_base_delay_ms,
        max_delay_ms=settings.transform_max_delay_ms,
    )
    logger.info("Message Board API started")
    yield
    logger.info("Message Board API shutting down")
    await close_transform_client()
    await manager.close()


app = FastAPI(
    title="Message Board API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(messages.router)

register_error_handlers(app)
