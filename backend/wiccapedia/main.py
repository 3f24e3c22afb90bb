"""Wiccapedia API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WiccapediaError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers registered from api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wiccapedia.api.error_handlers import register_error_handlers
from wiccapedia.api.routes import (
    covers, decorations, gems, health, info, notebooks, users,
)
from wiccapedia.config import get_settings
from wiccapedia.infrastructure.database import close_db, init_db
from wiccapedia.infrastructure.observability import setup_logging

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
    logger.info("Wiccapedia API started")
    yield
    logger.info("Wiccapedia API shutting down")
    await close_db()


app = FastAPI(
    title="Wiccapedia API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

# Routes — explicit registration
app.include_router(info.router)
app.include_router(health.router)
app.include_router(users.router)
app.include_router(notebooks.router)
app.include_router(covers.router)
app.include_router(decorations.router)
app.include_router(gems.router)

register_error_handlers(app)
