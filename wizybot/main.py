"""
WizyBot - Main Application Entry Point

This module provides the FastAPI application for the WizyBot shopping
assistant and the `wizybot` console entry point that serves it with uvicorn.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wizybot import __version__
from wizybot.api.errors import register_exception_handlers
from wizybot.api.middleware.logging import RequestLoggingMiddleware
from wizybot.api.routes.agent import router as agent_router
from wizybot.api.routes.health import router as health_router
from wizybot.core.config import Settings, get_settings
from wizybot.observability.logging import configure_logging, get_logger

# Application metadata
APP_NAME = "WizyBot"
APP_DESCRIPTION = "Shopping assistant with product search and currency conversion"


# =============================================================================
# Lifespan Context Manager
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup and announce the service."""
    settings: Settings = app.state.settings
    configure_logging(level=settings.log_level)

    print(f"🚀 {APP_NAME} v{__version__} starting in {settings.environment} mode")
    print(f"📚 API docs: http://localhost:{settings.port}/docs")
    get_logger(__name__).info(
        "startup",
        service=settings.service_name,
        model=settings.openai_model,
        catalog=settings.catalog_path,
    )

    app.state.initialized = True

    yield

    print(f"👋 {APP_NAME} shutting down")
    app.state.initialized = False


# =============================================================================
# Application Factory
# =============================================================================


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings override (tests); defaults to get_settings().
    """
    settings = settings or get_settings()
    docs_enabled = settings.environment != "production"

    app = FastAPI(
        title=APP_NAME,
        description=APP_DESCRIPTION,
        version=__version__,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(agent_router)

    @app.get("/", tags=["Info"])
    async def root() -> dict[str, Any]:
        """Root endpoint returning basic service information."""
        return {
            "service": APP_NAME,
            "version": __version__,
            "docs": "/docs" if docs_enabled else "disabled",
        }

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "wizybot.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
