"""
Bookmark storage.

``InMemoryBookmarkRepository`` keeps bookmarks in a dictionary keyed
by identifier.  Contents live only as long as the process; a restart
starts from an empty store.  Every operation holds one coarse
reader/writer lock for its whole duration, so the repository can be
shared between request threads.
"""

from typing import Dict, List, Protocol

from ..core.errors import AlreadyExistsError, NotFoundError
from ..core.rwlock import ReadWriteLock
from ..models.bookmark import Bookmark


class BookmarkRepository(Protocol):
    """Storage interface used by the service layer."""

    def create(self, bookmark: Bookmark) -> None:
        """Store a new bookmark.

        Raises:
            AlreadyExistsError: If a bookmark with the same id is stored.
        """

    def get_by_id(self, bookmark_id: str) -> Bookmark:
        """Return the bookmark with ``bookmark_id``.

        Raises:
            NotFoundError: If no such bookmark is stored.
        """

    def get_all(self) -> List[Bookmark]:
        """Return every stored bookmark in no particular order."""

    def delete(self, bookmark_id: str) -> None:
        """Remove the bookmark with ``bookmark_id``.

        Raises:
            NotFoundError: If no such bookmark is stored.
        """


class InMemoryBookmarkRepository:
    """Thread‑safe dictionary of bookmarks."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._bookmarks: Dict[str, Bookmark] = {}

    def create(self, bookmark: Bookmark) -> None:
        with self._lock.write_locked():
            if bookmark.id in self._bookmarks:
                # ids come from the service, so this only happens on a collision
                raise AlreadyExistsError(f"bookmark with ID {bookmark.id} already exists")
            self._bookmarks[bookmark.id] = bookmark

    def get_by_id(self, bookmark_id: str) -> Bookmark:
        # Returns the stored object itself, not a copy.
        with self._lock.read_locked():
            try:
                return self._bookmarks[bookmark_id]
            except KeyError:
                raise NotFoundError() from None

    def get_all(self) -> List[Bookmark]:
        with self._lock.read_locked():
            return list(self._bookmarks.values())

    def delete(self, bookmark_id: str) -> None:
        with self._lock.write_locked():
            if bookmark_id not in self._bookmarks:
                raise NotFoundError()
            del self._bookmarks[bookmark_id]
