import threading

import pytest

from bookmark_api.app.core.errors import AlreadyExistsError, NotFoundError
from bookmark_api.app.models.bookmark import Bookmark


def _bookmark(bookmark_id: str, title: str = "Example") -> Bookmark:
    return Bookmark(id=bookmark_id, url="https://example.com", title=title)


def test_create_then_get_returns_same_object(repository):
    bookmark = _bookmark("1")
    repository.create(bookmark)
    assert repository.get_by_id("1") is bookmark


def test_get_missing_raises_not_found(repository):
    with pytest.raises(NotFoundError):
        repository.get_by_id("missing")


def test_duplicate_id_rejected_and_prior_entry_kept(repository):
    first = _bookmark("dup", title="First")
    repository.create(first)
    with pytest.raises(AlreadyExistsError) as info:
        repository.create(_bookmark("dup", title="Second"))
    assert "dup" in str(info.value)
    assert repository.get_by_id("dup") is first
    assert repository.get_by_id("dup").title == "First"
    assert len(repository.get_all()) == 1


def test_get_all_empty(repository):
    assert repository.get_all() == []


def test_get_all_returns_every_bookmark(repository):
    for i in range(5):
        repository.create(_bookmark(str(i)))
    assert {b.id for b in repository.get_all()} == {"0", "1", "2", "3", "4"}


def test_get_all_returns_new_list(repository):
    repository.create(_bookmark("1"))
    listing = repository.get_all()
    listing.clear()
    assert len(repository.get_all()) == 1


def test_delete_removes(repository):
    repository.create(_bookmark("1"))
    repository.delete("1")
    with pytest.raises(NotFoundError):
        repository.get_by_id("1")


def test_delete_missing_raises_not_found(repository):
    with pytest.raises(NotFoundError):
        repository.delete("missing")


@pytest.mark.parametrize("created, deleted", [(0, 0), (3, 1), (10, 10), (7, 4)])
def test_count_is_creates_minus_deletes(repository, created, deleted):
    for i in range(created):
        repository.create(_bookmark(str(i)))
    for i in range(deleted):
        repository.delete(str(i))
    assert len(repository.get_all()) == created - deleted


def test_concurrent_access(repository):
    workers = 8
    per_worker = 50
    errors = []

    def work(worker: int) -> None:
        try:
            for i in range(per_worker):
                bookmark_id = f"{worker}-{i}"
                repository.create(_bookmark(bookmark_id))
                repository.get_by_id(bookmark_id)
                repository.get_all()
                if i % 2:
                    repository.delete(bookmark_id)
        except Exception as exc:  # pragma: no cover - reported below
            errors.append(exc)

    threads = [threading.Thread(target=work, args=(w,)) for w in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert errors == []
    assert len(repository.get_all()) == workers * per_worker // 2
