"""
Bookmark domain entity.

A bookmark is a saved URL with a title, a free‑text description and
an ordered list of tags.  The identifier and timestamps are assigned
by :class:`~bookmark_api.app.services.bookmark_service.BookmarkService`;
instances created by clients leave them empty.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from urllib.parse import urlsplit

from ..core.errors import InvalidURLError, TitleTooShortError

MIN_TITLE_LENGTH = 3


@dataclass
class Bookmark:
    """A stored bookmark record."""

    url: str = ""
    title: str = ""
    description: str = ""
    tags: Optional[List[str]] = None
    id: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> None:
        """Check the business rules for a bookmark.

        The title is checked before the URL, so a bookmark with both a
        short title and a bad URL reports ``TitleTooShortError``.

        Raises
        ------
        TitleTooShortError
            If the title, stripped of surrounding whitespace, has fewer
            than three characters.
        InvalidURLError
            If the URL is not absolute (scheme and host are required).
        """
        if len(self.title.strip()) < MIN_TITLE_LENGTH:
            raise TitleTooShortError()
        if not is_absolute_url(self.url):
            raise InvalidURLError()


def is_absolute_url(url: str) -> bool:
    """Return ``True`` if ``url`` has a scheme and a host."""
    if not url or any(ch.isspace() for ch in url):
        return False
    try:
        parts = urlsplit(url)
        # accessing the port validates it; a bad one raises ValueError
        parts.port
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.hostname)
