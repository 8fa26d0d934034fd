"""
Application factory for the Bookmark API.

``create_app`` sets up logging, wires the in‑memory repository into a
``BookmarkService`` and includes the versioned routers.  Each call
builds a fresh, empty store, so there is no module‑level application
instance; serve it with uvicorn's factory mode::

    uvicorn bookmark_api.app.main:create_app --factory

or through ``bookmark_api.app.server`` which also applies the listen
address and timeouts from ``Settings``.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, get_settings
from .core.logging_config import setup_logging
from .repositories.bookmark_repository import InMemoryBookmarkRepository
from .services.bookmark_service import BookmarkService


def create_app(
    service: Optional[BookmarkService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[BookmarkService]
        Service used by the routes.  When omitted a new service over an
        empty ``InMemoryBookmarkRepository`` is created.
    settings : Optional[Settings]
        Application settings; defaults to ``get_settings()``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.bookmark_service = service or BookmarkService(InMemoryBookmarkRepository())

    # Bookmark routes live at the root (``/bookmarks``) rather than under
    # a version prefix.
    app.include_router(v1_router)

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Undecodable JSON and bodies of the wrong shape are both a bad request.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request body"},
        )

    return app
