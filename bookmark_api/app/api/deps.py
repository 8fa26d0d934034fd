"""
Shared FastAPI dependencies.

The bookmark service is created by the application factory and kept
on ``app.state``; routes obtain it through :func:`get_bookmark_service`
instead of importing a module‑level instance.
"""

from fastapi import Request

from ..services.bookmark_service import BookmarkService


def get_bookmark_service(request: Request) -> BookmarkService:
    """Return the service attached to the running application."""
    return request.app.state.bookmark_service
