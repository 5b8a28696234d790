"""
Recordings API: Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── sqlite_settings: Settings pointing at a temporary SQLite file
    ├── album_store:     Real SQLAlbumStore with the album table created
    ├── test_client:     HTTPX AsyncClient over an app serving album_store
    ├── mock_store:      AsyncMock standing in for an AlbumStore
    └── mock_client:     HTTPX AsyncClient over an app serving mock_store
"""

import os

# Keep test runs quiet and away from any real MySQL credentials
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.setdefault("DBUSER", "test")
os.environ.setdefault("DBPASS", "test")

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from recordings.config import Settings
from recordings.database import Base, build_engine, build_session_factory
from recordings.main import create_app
from recordings.services.album_store import SQLAlbumStore


@pytest.fixture
def sqlite_settings(tmp_path):
    """Settings whose DATABASE_URL is a throwaway SQLite file."""
    db_file = tmp_path / "recordings.db"
    return Settings(
        database_url=f"sqlite+aiosqlite:///{db_file}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def album_store(sqlite_settings):
    """
    Provides a SQLAlbumStore over an empty `album` table.

    The table is created from model metadata; production relies on an
    externally managed schema.
    """
    engine = build_engine(sqlite_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield SQLAlbumStore(build_session_factory(engine))

    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(sqlite_settings, album_store):
    """
    HTTPX AsyncClient wired straight into the ASGI app.

    Usage:
        async def test_scenario(test_client):
            response = await test_client.post("/albums", json={...})
            assert response.status_code == 200
    """
    app = create_app(sqlite_settings, store=album_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_store():
    """An AlbumStore double whose methods are AsyncMocks."""
    return AsyncMock(spec=SQLAlbumStore)


@pytest_asyncio.fixture
async def mock_client(sqlite_settings, mock_store):
    """HTTPX AsyncClient over an app serving mock_store."""
    app = create_app(sqlite_settings, store=mock_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
