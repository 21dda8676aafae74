"""Shared fixtures for the short link tests."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from shortlinks.core.config import Settings
from shortlinks.main import create_app
from shortlinks.repository import InMemoryURLRepository, SQLiteURLRepository

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"
DOMAIN = "https://short.ly/"


@pytest.fixture
def settings():
    """Settings pointing at the repo templates and the test domain."""
    return Settings(
        _env_file=None,
        domain=DOMAIN,
        template_path=str(TEMPLATE_DIR),
        database_url=":memory:",
        slug_length=6,
        max_slug_attempts=5,
    )


@pytest.fixture(params=["memory", "sqlite"])
def repository(request):
    """Each repository implementation, freshly initialized."""
    if request.param == "memory":
        repo = InMemoryURLRepository()
    else:
        repo = SQLiteURLRepository(":memory:")
    repo.init()
    yield repo
    repo.close()


@pytest.fixture
def memory_repository():
    return InMemoryURLRepository()


@pytest.fixture
def client(settings, repository):
    """Create a test client around an app built with the test repository."""
    app = create_app(settings, repository)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
