"""Incalink API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map IncalinkError -> JSON responses
    - CORS configured from settings (not hardcoded)
    - One DatabaseSessionManager per app, held on app.state.db_manager

Design Decisions:
    - create_app factory: tests pass their own settings and session manager
    - Lifespan over @app.on_event; it builds the manager only when none was supplied
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from incalink.api.error_handlers import register_error_handlers
from incalink.api.routes import groups, health
from incalink.config import Settings, get_settings
from incalink.infrastructure.database import DatabaseSessionManager
from incalink.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    db_manager: DatabaseSessionManager | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        owns_manager = app.state.db_manager is None
        if owns_manager:
            app.state.db_manager = DatabaseSessionManager(
                settings.sqlalchemy_url,
                pool_size=settings.database_pool_size,
            )
        logger.info(f"Incalink API started on port {settings.port}")
        yield
        logger.info("Incalink API shutting down")
        if owns_manager:
            await app.state.db_manager.dispose()
            app.state.db_manager = None

    app = FastAPI(title="Incalink API", version="1.0.0", lifespan=lifespan)
    app.state.db_manager = db_manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(groups.router)

    register_error_handlers(app)
    return app


app = create_app()
