"""Cadastro API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CadastroError → {"message": ...} responses
    - CORS configured from settings (not hardcoded)
    - Database engine initialized once on startup via lifespan context manager,
      schema created when DATABASE_AUTO_CREATE is set

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Landing page mounted AFTER API routes so /cadastro and /usuario/* take precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from cadastro.api.error_handlers import register_error_handlers
from cadastro.api.routes import health, registrants, registration
from cadastro.config import get_settings
from cadastro.infrastructure.database import init_db
from cadastro.infrastructure.observability import setup_logging

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
        f"Cadastro API started on http://{settings.host}:{settings.port}",
    )
    yield
    await manager.dispose()
    logger.info("Cadastro API shutting down")


app = FastAPI(title="Cadastro API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(registration.router)
app.include_router(registrants.router)

# html=True serves index.html at "/"
if os.path.isdir(settings.static_dir):
    app.mount(
        "/", StaticFiles(directory=settings.static_dir, html=True),
        name="static",
    )
