from datetime import datetime, timezone
from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from bookmark_api.app.core.config import Settings
from bookmark_api.app.main import create_app
from bookmark_api.app.models.bookmark import Bookmark
from bookmark_api.app.repositories.bookmark_repository import InMemoryBookmarkRepository
from bookmark_api.app.services.bookmark_service import BookmarkService

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def valid_bookmark() -> Bookmark:
    """A bookmark that passes validation; tests may modify it."""
    return Bookmark(
        url="https://example.com",
        title="Example Domain",
        description="This domain is for use in illustrative examples",
        tags=["sample", "test"],
    )


@pytest.fixture
def repository() -> InMemoryBookmarkRepository:
    return InMemoryBookmarkRepository()


@pytest.fixture
def service(repository) -> BookmarkService:
    return BookmarkService(repository, clock=lambda: FIXED_NOW)


@pytest.fixture
def client() -> TestClient:
    """Client for an app backed by a real, empty in‑memory store."""
    return TestClient(create_app(settings=Settings()))


@pytest.fixture
def mock_service():
    return create_autospec(BookmarkService, instance=True)


@pytest.fixture
def mock_client(mock_service) -> TestClient:
    return TestClient(create_app(service=mock_service, settings=Settings()))
