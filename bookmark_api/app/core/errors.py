"""
Error taxonomy shared by every layer.

Each layer that lets an error through adds its own call‑site context
with :meth:`BookmarkError.wrap` and re‑raises the same exception
object.  Callers can therefore still match on the concrete class
(``except NotFoundError``) while the message carries the full trail,
for example ``"service.create: title must be at least 3 characters"``.

Exceptions that do not belong to this hierarchy are converted to
:class:`InternalError` by :func:`error_context`; the original
exception remains reachable through ``__cause__``.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional


class BookmarkError(Exception):
    """Base class for all bookmark errors."""

    default_message = "bookmark error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)
        self.trail: List[str] = []

    @property
    def message(self) -> str:
        """The error text without any context prefixes."""
        return self.args[0]

    def wrap(self, where: str) -> "BookmarkError":
        """Prefix ``where`` to the context trail and return ``self``."""
        self.trail.insert(0, where)
        return self

    def __str__(self) -> str:
        return ": ".join([*self.trail, self.message])


class NotFoundError(BookmarkError):
    default_message = "bookmark not found"


class AlreadyExistsError(BookmarkError):
    default_message = "bookmark already exists"


class ValidationError(BookmarkError):
    """A bookmark was rejected because of a malformed title or URL."""

    default_message = "bookmark is invalid"


class InvalidURLError(ValidationError):
    default_message = "the provided URL is invalid"


class TitleTooShortError(ValidationError):
    default_message = "title must be at least 3 characters"


class InvalidArgumentError(BookmarkError):
    default_message = "id is required"


class InternalError(BookmarkError):
    default_message = "internal error"


@contextmanager
def error_context(where: str) -> Iterator[None]:
    """Tag any error raised inside the block with ``where``.

    Bookmark errors are wrapped in place.  Anything else becomes an
    :class:`InternalError` chained to the original exception.
    """
    try:
        yield
    except BookmarkError as exc:
        raise exc.wrap(where)
    except Exception as exc:
        raise InternalError(str(exc) or type(exc).__name__).wrap(where) from exc
