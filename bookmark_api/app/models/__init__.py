"""Domain entities."""

from .bookmark import Bookmark  # noqa: F401
