"""
Service layer for bookmarks.

``BookmarkService`` is the only component that assigns identity to a
bookmark.  It stamps new bookmarks with a random UUID and the current
time, validates them and hands them to the repository.  Lookups and
deletions reject an empty identifier before reaching storage.

Errors are never swallowed here: anything raised below is tagged with
the operation name (``service.create``, ``service.get_by_id`` …) and
re‑raised for the API layer to translate.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, List

from ..core.errors import InvalidArgumentError, error_context
from ..models.bookmark import Bookmark
from ..repositories.bookmark_repository import BookmarkRepository


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookmarkService:
    """Business rules for creating, reading and deleting bookmarks."""

    def __init__(
        self,
        repository: BookmarkRepository,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.repository = repository
        self._new_id = id_factory
        self._now = clock

    def create(self, bookmark: Bookmark) -> Bookmark:
        """Assign an id and timestamps, validate and store ``bookmark``.

        The caller's object is updated in place; it is also returned
        for convenience.  Validation happens after the id and
        timestamps are set, so an invalid bookmark still carries them
        when the error propagates, but it never reaches the repository.

        Raises
        ------
        ValidationError
            ``TitleTooShortError`` or ``InvalidURLError``, tagged
            ``service.create``.
        AlreadyExistsError
            If the repository already holds the generated id, tagged
            ``service.create: failed to save``.
        """
        logger = logging.getLogger(__name__)
        now = self._now()
        bookmark.id = self._new_id()
        bookmark.created_at = now
        bookmark.updated_at = now

        with error_context("service.create"):
            bookmark.validate()
            with error_context("failed to save"):
                self.repository.create(bookmark)
        logger.info("Created bookmark %s (%s)", bookmark.id, bookmark.url)
        return bookmark

    def get_by_id(self, bookmark_id: str) -> Bookmark:
        """Return the bookmark with ``bookmark_id``.

        Raises ``InvalidArgumentError`` for an empty id and
        ``NotFoundError`` when nothing is stored under it.
        """
        with error_context("service.get_by_id"):
            if not bookmark_id:
                raise InvalidArgumentError()
            return self.repository.get_by_id(bookmark_id)

    def list(self) -> List[Bookmark]:
        """Return all bookmarks in no particular order."""
        with error_context("service.list"):
            return self.repository.get_all()

    def delete(self, bookmark_id: str) -> None:
        """Delete the bookmark with ``bookmark_id``.

        Raises ``InvalidArgumentError`` for an empty id and
        ``NotFoundError`` when nothing is stored under it.
        """
        logger = logging.getLogger(__name__)
        with error_context("service.delete"):
            if not bookmark_id:
                raise InvalidArgumentError()
            self.repository.delete(bookmark_id)
        logger.info("Deleted bookmark %s", bookmark_id)
