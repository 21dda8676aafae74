"""Contract tests run against every URL repository implementation."""

import threading

import pytest

from shortlinks.core.exceptions import (
    DuplicateLongURLError,
    DuplicateSlugError,
    NotFoundError,
    StorageError,
)
from shortlinks.models.url import URLMapping
from shortlinks.repository import SQLiteURLRepository

DOMAIN = "https://short.ly/"


def make_mapping(slug: str, long_url: str) -> URLMapping:
    return URLMapping(slug=slug, long_url=long_url, short_url=DOMAIN + slug)


class TestCreateAndRead:
    """Tests for create, read_by_slug and read_by_long_url."""

    def test_round_trip(self, repository):
        """Test that a created mapping reads back equal by slug and long URL."""
        mapping = make_mapping("abc123", "https://example.com/page")
        assert repository.create(mapping) is None

        assert repository.read_by_slug("abc123") == mapping
        assert repository.read_by_long_url("https://example.com/page") == mapping

    def test_read_miss_is_none(self, repository):
        """Test that unknown keys are reported as absent, not as errors."""
        assert repository.read_by_slug("nope00") is None
        assert repository.read_by_long_url("https://unknown.example.com") is None

    def test_duplicate_long_url(self, repository):
        """Test that a second mapping for the same long URL is rejected."""
        first = make_mapping("first1", "https://example.com")
        repository.create(first)

        with pytest.raises(DuplicateLongURLError):
            repository.create(make_mapping("second", "https://example.com"))

        assert repository.read_by_long_url("https://example.com") == first
        assert repository.read_by_slug("second") is None

    def test_duplicate_slug(self, repository):
        """Test that a taken slug is rejected."""
        repository.create(make_mapping("same00", "https://one.example.com"))

        with pytest.raises(DuplicateSlugError):
            repository.create(make_mapping("same00", "https://two.example.com"))

        assert repository.read_by_long_url("https://two.example.com") is None

    def test_long_url_is_not_normalized(self, repository):
        """Test that URLs differing only by a trailing slash are distinct."""
        repository.create(make_mapping("slash0", "https://example.com"))
        repository.create(make_mapping("slash1", "https://example.com/"))

        assert repository.read_by_long_url("https://example.com").slug == "slash0"
        assert repository.read_by_long_url("https://example.com/").slug == "slash1"


class TestUpdate:
    """Tests for update."""

    def test_update_then_read(self, repository):
        """Test that update changes only the long URL."""
        repository.create(make_mapping("upd001", "https://old.example.com"))

        repository.update("https://old.example.com", "https://new.example.com")

        updated = repository.read_by_long_url("https://new.example.com")
        assert updated.long_url == "https://new.example.com"
        assert updated.slug == "upd001"
        assert updated.short_url == DOMAIN + "upd001"
        assert updated.updated_at >= updated.created_at
        assert repository.read_by_long_url("https://old.example.com") is None
        assert repository.read_by_slug("upd001").long_url == "https://new.example.com"

    def test_update_not_found(self, repository):
        with pytest.raises(NotFoundError):
            repository.update("https://missing.example.com", "https://new.example.com")

    def test_update_to_taken_long_url(self, repository):
        """Test that update cannot steal another mapping's long URL."""
        repository.create(make_mapping("aaaaaa", "https://a.example.com"))
        repository.create(make_mapping("bbbbbb", "https://b.example.com"))

        with pytest.raises(DuplicateLongURLError):
            repository.update("https://a.example.com", "https://b.example.com")

        assert repository.read_by_slug("aaaaaa").long_url == "https://a.example.com"

    def test_update_to_same_long_url(self, repository):
        repository.create(make_mapping("same01", "https://a.example.com"))

        repository.update("https://a.example.com", "https://a.example.com")

        assert repository.read_by_slug("same01").long_url == "https://a.example.com"


class TestDelete:
    """Tests for delete."""

    def test_delete_then_read(self, repository):
        """Test that a deleted mapping is no longer found."""
        repository.create(make_mapping("del001", "https://example.com"))

        repository.delete("https://example.com")

        assert repository.read_by_long_url("https://example.com") is None
        assert repository.read_by_slug("del001") is None

    def test_second_delete_not_found(self, repository):
        repository.create(make_mapping("del002", "https://example.com"))
        repository.delete("https://example.com")

        with pytest.raises(NotFoundError):
            repository.delete("https://example.com")

    def test_delete_not_found(self, repository):
        with pytest.raises(NotFoundError):
            repository.delete("https://missing.example.com")

    def test_no_update_after_delete(self, repository):
        """Test that a deleted mapping cannot be brought back by update."""
        repository.create(make_mapping("del003", "https://example.com"))
        repository.delete("https://example.com")

        with pytest.raises(NotFoundError):
            repository.update("https://example.com", "https://new.example.com")

    def test_long_url_reusable_after_delete(self, repository):
        """Test that a deleted long URL can get a new short link."""
        repository.create(make_mapping("old001", "https://example.com"))
        repository.delete("https://example.com")

        fresh = make_mapping("new001", "https://example.com")
        repository.create(fresh)

        assert repository.read_by_long_url("https://example.com") == fresh

    def test_slug_not_reissued_after_delete(self, repository):
        """Test that a deleted slug stays taken."""
        repository.create(make_mapping("gone01", "https://example.com"))
        repository.delete("https://example.com")

        with pytest.raises(DuplicateSlugError):
            repository.create(make_mapping("gone01", "https://other.example.com"))


class TestConcurrency:
    """Tests for racing writers."""

    def test_racing_creates_have_one_winner(self, repository):
        """Test that concurrent creates for one long URL have exactly one winner."""
        workers = 8
        barrier = threading.Barrier(workers)
        outcomes = []
        outcomes_lock = threading.Lock()

        def worker(index: int) -> None:
            mapping = make_mapping(f"race{index:02d}", "https://race.example.com")
            barrier.wait()
            try:
                repository.create(mapping)
                result = "created"
            except DuplicateLongURLError:
                result = "duplicate"
            with outcomes_lock:
                outcomes.append(result)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert outcomes.count("created") == 1
        assert outcomes.count("duplicate") == workers - 1
        assert repository.read_by_long_url("https://race.example.com") is not None


class TestSQLiteRepository:
    """Tests specific to the SQLite implementation."""

    def test_storage_error_is_not_a_miss(self):
        """Test that a broken store raises instead of reporting not found."""
        repository = SQLiteURLRepository(":memory:")  # schema never created
        try:
            with pytest.raises(StorageError):
                repository.read_by_slug("abc123")
        finally:
            repository.close()

    def test_persists_across_connections(self, tmp_path):
        """Test that mappings survive closing and reopening the database file."""
        db_file = str(tmp_path / "url.db")
        mapping = make_mapping("disk01", "https://example.com")

        repository = SQLiteURLRepository(db_file)
        repository.init()
        repository.create(mapping)
        repository.close()

        reopened = SQLiteURLRepository(db_file)
        reopened.init()
        try:
            assert reopened.read_by_slug("disk01") == mapping
        finally:
            reopened.close()
