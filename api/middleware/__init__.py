"""API middleware package."""

from api.middleware.error_handling import error_response, setup_error_handlers

__all__ = [
    "error_response",
    "setup_error_handlers",
]
