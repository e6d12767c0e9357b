"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
import os
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from application.exceptions import (
    PresetDeletionError,
    ProgramNotFoundError,
    ProgramStateError,
    TemplateNotFoundError,
    WorkoutNotFoundError,
)
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Training Progression API",
        description="Program progression, schedule, overload suggestion and PR tracking API",
        version="1.0.0",
    )

    _configure_cors(app)
    _register_exception_handlers(app)
    _include_routers(app)

    logger.info(
        f"Training Progression API created (environment={settings.environment}, "
        f"database={'configured' if settings.supabase_configured else 'not configured'})"
    )
    return app


def _configure_logging(settings: Settings) -> None:
    """Configure root logging once from settings.log_level."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for training-progression-api")


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    # Add production domains from environment if configured
    production_origins = os.environ.get("CORS_ALLOWED_ORIGINS", "").split(",")
    trusted_origins.extend([origin.strip() for origin in production_origins if origin.strip()])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Map application exceptions to HTTP responses."""

    @app.exception_handler(ProgramStateError)
    async def program_state_error_handler(request: Request, exc: ProgramStateError):
        logger.info(f"Rejected program transition on {request.url.path}: {exc.message}")
        content = {"detail": exc.message}
        if exc.current_program_id:
            content["current_program_id"] = exc.current_program_id
        return JSONResponse(status_code=409, content=content)

    @app.exception_handler(ProgramNotFoundError)
    @app.exception_handler(WorkoutNotFoundError)
    @app.exception_handler(TemplateNotFoundError)
    async def not_found_handler(request: Request, exc: Exception):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(PresetDeletionError)
    async def preset_deletion_handler(request: Request, exc: PresetDeletionError):
        return JSONResponse(status_code=403, content={"detail": str(exc)})


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        programs_router,
        records_router,
        schedule_router,
        sessions_router,
        workouts_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(programs_router)
    app.include_router(schedule_router)
    app.include_router(sessions_router)
    app.include_router(workouts_router)
    app.include_router(records_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
