"""
api.main - FastAPI application entry point.

Run with:
    uvicorn api.main:app --reload
    python -m api.main
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.models import ServiceInfoResponse
from api.routers import gamepasses_router, health_router
from api.middleware import setup_error_handlers
from core.config import get_settings

if TYPE_CHECKING:
    from core.app_context import AppContext

logger = logging.getLogger(__name__)

SERVICE_NAME = "Roblox GamePass Proxy"

ENDPOINTS = {
    "/api/gamepasses/:gameId": "Get all gamepasses for a game",
    "/api/gamepass/:passId": "Get details for specific gamepass",
    "/health": "Health check",
}

# Global app context (initialized at startup)
_app_context: "AppContext | None" = None


def get_app_context() -> "AppContext":
    """Get the global app context. Must be called after app startup."""
    if _app_context is None:
        raise RuntimeError("App context not initialized. Server not started?")
    return _app_context


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown."""
    global _app_context

    # Startup
    logger.info(f"[SERVER] Starting {SERVICE_NAME}...")
    from core.app_context import create_app_context

    _app_context = create_app_context()
    logger.info("App context initialized successfully")

    yield

    # Shutdown
    logger.info(f"[SERVER] Shutting down {SERVICE_NAME}...")
    if _app_context is not None:
        _app_context.close()
        _app_context = None


# Create FastAPI application
app = FastAPI(
    title=SERVICE_NAME,
    description="Lists Roblox game passes that are for sale, with prices",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup error handlers
setup_error_handlers(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(gamepasses_router, prefix="/api", tags=["Game Passes"])


@app.get("/", response_model=ServiceInfoResponse)
async def root() -> ServiceInfoResponse:
    """Root endpoint - service info and available endpoints."""
    return ServiceInfoResponse(status="online", service=SERVICE_NAME, endpoints=ENDPOINTS)


if __name__ == "__main__":
    import uvicorn

    from core.logging_setup import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
