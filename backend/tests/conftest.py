"""
Noteboard Backend: Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Overview:
    ├── memory_repository: InMemoryNoteRepository (fresh per test)
    ├── app / test_client: FastAPI app whose routes use memory_repository
    ├── sqlite_database: Database on a temporary SQLite file, schema created
    └── sqlite_client: HTTP client for an app backed by sqlite_database
"""

import os

# Settings are read at import time; point them at throwaway values first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./noteboard_test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from noteboard.config import Settings  # noqa: E402
from noteboard.database import Database  # noqa: E402
from noteboard.dependencies import get_note_repository  # noqa: E402
from noteboard.main import create_app  # noqa: E402
from noteboard.repositories.memory import InMemoryNoteRepository  # noqa: E402


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a per-test SQLite file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}",
        log_level="WARNING",
    )


@pytest.fixture
def memory_repository():
    return InMemoryNoteRepository()


@pytest.fixture
def app(test_settings, memory_repository):
    """
    Application whose note routes run against memory_repository.

    The repository dependency is overridden, so no database is touched by
    the /notes endpoints.
    """
    application = create_app(test_settings)
    application.dependency_overrides[get_note_repository] = lambda: memory_repository
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient wired straight into the app through ASGITransport.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def sqlite_database(test_settings):
    """A Database on a temporary SQLite file with the notes table created."""
    database = Database(test_settings)
    await database.create_schema()
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def sqlite_client(test_settings, sqlite_database):
    """HTTP client for an app using the real SQLAlchemy repository on SQLite."""
    application = create_app(test_settings, database=sqlite_database)
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

