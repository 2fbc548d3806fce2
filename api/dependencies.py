"""
api.dependencies - Route access to the upstream clients.

Routes receive the AppContext built at startup, which holds the games
listing and economy clients. Tests swap it through
app.dependency_overrides[get_app_context].
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from core.app_context import AppContext


def get_app_context() -> "AppContext":
    """AppContext created by the lifespan handler in api.main."""
    from api.main import get_app_context as _get_ctx

    return _get_ctx()
