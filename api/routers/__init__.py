"""API routers package."""

from api.routers.health import router as health_router
from api.routers.gamepasses import router as gamepasses_router

__all__ = [
    "health_router",
    "gamepasses_router",
]
