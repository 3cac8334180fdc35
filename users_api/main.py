"""Users API: FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Exactly one users binding mounted, chosen by settings.api_router
    - Global error handlers map UsersApiError → plain-text responses
    - CORS configured from settings (not hardcoded)
    - DatabaseSessionManager built once in the lifespan and stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(settings) factory: tests build apps with their own settings
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api import __version__
from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, users, users_compact
from users_api.config import Settings, get_settings
from users_api.infrastructure.database import DatabaseSessionManager
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await db_manager.create_tables()
    app.state.db_manager = db_manager
    logger.info(f"Users API started ({settings.api_router} router)")
    try:
        yield
    finally:
        logger.info("Users API shutting down")
        await db_manager.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given settings."""
    settings = settings or get_settings()
    app = FastAPI(title="Users API", version=__version__, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    if settings.api_router == "compact":
        app.router.routes.extend(users_compact.routes)
    else:
        app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
