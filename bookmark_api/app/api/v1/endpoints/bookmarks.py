"""
Bookmark endpoints for API v1.

These routes expose create, list, retrieve and delete operations for
bookmarks.  The handlers are plain functions, so FastAPI runs each
request on its worker thread pool; the service and repository below
are synchronous and thread‑safe.

Status mapping is intentionally coarse: any failure while listing or
creating is a 500 carrying the error text, any failure while looking a
bookmark up is a 404, and any failure while deleting is a 500 (a
missing bookmark included).
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from bookmark_api.app.api.deps import get_bookmark_service
from bookmark_api.app.core.errors import BookmarkError
from bookmark_api.app.schemas.bookmark import BookmarkCreate, BookmarkRead
from bookmark_api.app.services.bookmark_service import BookmarkService

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("", response_model=List[BookmarkRead], operation_id="getAllBookmarks")
def list_bookmarks(
    service: BookmarkService = Depends(get_bookmark_service),
) -> List[BookmarkRead]:
    """Return every stored bookmark, in no particular order."""
    try:
        bookmarks = service.list()
    except BookmarkError as exc:
        logger.error("Listing bookmarks failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return [BookmarkRead.model_validate(b) for b in bookmarks]


@router.post(
    "",
    response_model=BookmarkRead,
    status_code=status.HTTP_201_CREATED,
    operation_id="createBookmark",
)
def create_bookmark(
    bookmark_in: BookmarkCreate,
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkRead:
    """Create a bookmark.

    The response carries the assigned ``id`` and timestamps.  A title
    shorter than three characters or a non‑absolute URL is rejected
    by the service and reported as HTTP 500.
    """
    bookmark = bookmark_in.to_bookmark()
    try:
        service.create(bookmark)
    except BookmarkError as exc:
        logger.warning("Creating bookmark failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return BookmarkRead.model_validate(bookmark)


@router.get("/{bookmark_id}", response_model=BookmarkRead, operation_id="getBookmarkByID")
def get_bookmark(
    bookmark_id: str,
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkRead:
    """Retrieve a single bookmark by its ID.

    Returns HTTP 404 if the lookup fails for any reason.
    """
    try:
        bookmark = service.get_by_id(bookmark_id)
    except BookmarkError as exc:
        logger.info("Bookmark lookup failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Bookmark not found") from exc
    return BookmarkRead.model_validate(bookmark)


@router.delete(
    "/{bookmark_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    operation_id="deleteBookmark",
)
def delete_bookmark(
    bookmark_id: str,
    service: BookmarkService = Depends(get_bookmark_service),
) -> None:
    """Delete a bookmark.

    Any failure, including an unknown ID, is reported as HTTP 500.
    """
    try:
        service.delete(bookmark_id)
    except BookmarkError as exc:
        logger.warning("Deleting bookmark failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Delete failed") from exc
    return None
