"""
FastAPI Application Entry Point.

This is the main entry point for the Notes API application.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notes_api.api import health, notes
from notes_api.core.config import get_app_config, get_environment, get_settings
from notes_api.core.exception_handlers import register_exception_handlers
from notes_api.core.logging import get_logger, setup_logging
from notes_api.core.middleware import RequestContextMiddleware
from notes_api.services.note_store import NoteStore
from notes_api.services.validation import NoteValidator

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app_config = get_app_config()
    setup_logging(level=get_settings().log_level, config=app_config.logging)

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": get_environment(),
        },
    )
    yield
    logger.info("Application shutting down", extra={"notes": app.state.note_store.count()})


def create_app(store: NoteStore | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Note store to serve. A fresh empty store is created when omitted,
            so every app instance owns its own collection.
    """
    app_config = get_app_config()
    app_settings = app_config.application

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )

    app.state.note_store = store if store is not None else NoteStore()
    app.state.note_validator = NoteValidator(
        title_max_length=app_config.notes.title_max_length,
        content_max_length=app_config.notes.content_max_length,
    )
    app.state.detailed_errors = app_config.features.api_detailed_errors

    app.add_middleware(
        RequestContextMiddleware,
        log_requests=app_config.features.api_request_logging,
    )

    cors_origins = app_settings.cors.origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(notes.router, prefix=f"{app_settings.api_prefix}/notes", tags=["notes"])

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    This function creates the app on first call and caches it.
    Use this instead of importing `app` directly to avoid
    import-time configuration errors.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn notes_api.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
