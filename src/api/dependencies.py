"""FastAPI dependencies for injection."""
from fastapi import Request

from core.config import get_settings
from services.storage import Storage


def get_storage(request: Request) -> Storage:
    """
    Return the store created at application startup.

    Tests replace this dependency with a fresh store per test.
    """
    return request.app.state.storage


__all__ = [
    "get_settings",
    "get_storage",
]
