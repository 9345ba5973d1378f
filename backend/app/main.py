"""Poem Service API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ServiceError → {"message": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Missing required environment keys are logged at startup, then reported per
      request as 500s naming the key
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import SERVICE_NAME, SERVICE_VERSION
from app.api.error_handlers import register_error_handlers
from app.api.routes import greeting, health, poem
from app.config import get_settings
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    missing = settings.missing_required()
    if missing:
        logger.warning(
            f"Missing required environment variables: {', '.join(missing)}",
        )
    logger.info(f"{SERVICE_NAME} started")
    yield
    logger.info(f"{SERVICE_NAME} shutting down")


app = FastAPI(title="Poem Service", version=SERVICE_VERSION, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(greeting.router)
app.include_router(poem.router)
app.include_router(health.router)

register_error_handlers(app)
