"""
Pydantic schemas for bookmarks.

``BookmarkCreate`` is the request body for creating a bookmark; only
``title`` and ``url`` are required.  Business validation (title
length, absolute URL) is left to the domain entity so that every
bookmark goes through the same rules whichever transport created it.

``BookmarkRead`` is the response representation.  Empty tag lists are
rendered as ``null`` and timestamps as RFC 3339 strings in UTC with a
``Z`` suffix.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from ..models.bookmark import Bookmark


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark."""

    title: str = Field(..., examples=["Example Domain"])
    url: str = Field(..., examples=["https://example.com"])
    description: Optional[str] = Field(None, examples=["An example page"])
    tags: Optional[List[str]] = Field(None, examples=[["sample", "test"]])

    def to_bookmark(self) -> Bookmark:
        """Map the request body onto a new, unsaved bookmark."""
        return Bookmark(
            url=self.url,
            title=self.title,
            description=self.description or "",
            tags=list(self.tags) if self.tags is not None else None,
        )


class BookmarkRead(BaseModel):
    """Schema for reading a bookmark from the API."""

    id: str
    url: str
    title: str
    description: str = ""
    tags: Optional[List[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }

    @field_validator("tags")
    @classmethod
    def empty_tags_as_none(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return v or None

    @field_serializer("created_at", "updated_at")
    def format_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.replace(tzinfo=None).isoformat() + "Z"
