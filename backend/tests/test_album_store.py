"""
Recordings API: Album Store Tests
==================================

What:  Tests for SQLAlbumStore against a real SQLite database.
How:   The album_store fixture creates the table in a temporary file;
       failure cases use an uninitialized database or a stalled session.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from recordings.database import build_engine, build_session_factory
from recordings.exceptions import DatabaseError, NotFoundError
from recordings.schemas.album import AlbumCreate, AlbumResponse
from recordings.services.album_store import SQLAlbumStore


class TestCreateAndGet:
    """create() followed by get_by_id()."""

    @pytest.mark.asyncio
    async def test_first_insert_gets_id_one(self, album_store):
        album_id = await album_store.create(AlbumCreate(title="A", artist="B", price=9.99))

        assert album_id == 1

    @pytest.mark.asyncio
    async def test_round_trip_matches_input(self, album_store):
        album = AlbumCreate(title="Blue Train", artist="John Coltrane", price=56.99)

        album_id = await album_store.create(album)
        stored = await album_store.get_by_id(album_id)

        assert stored == AlbumResponse(
            id=album_id, title="Blue Train", artist="John Coltrane", price=56.99
        )

    @pytest.mark.asyncio
    async def test_ids_increase(self, album_store):
        first = await album_store.create(AlbumCreate(title="Giant Steps", artist="John Coltrane", price=63.99))
        second = await album_store.create(AlbumCreate(title="Jeru", artist="Gerry Mulligan", price=17.99))

        assert second > first

    @pytest.mark.asyncio
    async def test_client_supplied_id_is_ignored(self, album_store):
        album_id = await album_store.create(AlbumCreate(id=42, title="Sarah Vaughan", artist="Sarah Vaughan", price=34.98))

        assert album_id == 1
        with pytest.raises(NotFoundError):
            await album_store.get_by_id(42)

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, album_store):
        with pytest.raises(NotFoundError) as exc_info:
            await album_store.get_by_id(999)

        assert exc_info.value.resource == "album"
        assert exc_info.value.resource_id == "999"


class TestListByArtist:
    """list_by_artist() filtering."""

    @pytest.mark.asyncio
    async def test_no_matches_returns_empty_list(self, album_store):
        await album_store.create(AlbumCreate(title="Jeru", artist="Gerry Mulligan", price=17.99))

        result = await album_store.list_by_artist("Nobody")

        assert result == []

    @pytest.mark.asyncio
    async def test_returns_exactly_matching_albums(self, album_store):
        await album_store.create(AlbumCreate(title="Blue Train", artist="John Coltrane", price=56.99))
        await album_store.create(AlbumCreate(title="Jeru", artist="Gerry Mulligan", price=17.99))
        await album_store.create(AlbumCreate(title="Giant Steps", artist="John Coltrane", price=63.99))

        result = await album_store.list_by_artist("John Coltrane")

        assert len(result) == 2
        assert all(album.artist == "John Coltrane" for album in result)
        assert [album.title for album in result] == ["Blue Train", "Giant Steps"]

    @pytest.mark.asyncio
    async def test_match_is_exact(self, album_store):
        await album_store.create(AlbumCreate(title="Blue Train", artist="John Coltrane", price=56.99))

        assert await album_store.list_by_artist("Coltrane") == []


class TestFailures:
    """Driver failures and deadlines surface as DatabaseError."""

    @pytest.mark.asyncio
    async def test_missing_table_raises_database_error(self, sqlite_settings):
        engine = build_engine(sqlite_settings)
        store = SQLAlbumStore(build_session_factory(engine))

        try:
            with pytest.raises(DatabaseError) as exc_info:
                await store.list_by_artist("John Coltrane")
        finally:
            await engine.dispose()

        assert exc_info.value.context["operation"] == "list_by_artist"
        assert "album" in exc_info.value.context["original_error"]

    @pytest.mark.asyncio
    async def test_insert_failure_raises_database_error(self, sqlite_settings):
        engine = build_engine(sqlite_settings)
        store = SQLAlbumStore(build_session_factory(engine))

        try:
            with pytest.raises(DatabaseError) as exc_info:
                await store.create(AlbumCreate(title="A", artist="B", price=1.0))
        finally:
            await engine.dispose()

        assert exc_info.value.context["operation"] == "create"

    @pytest.mark.asyncio
    async def test_slow_query_hits_deadline(self):
        async def stall(*args, **kwargs):
            await asyncio.sleep(5)

        session = MagicMock()
        session.execute = AsyncMock(side_effect=stall)
        session_factory = MagicMock()
        session_factory.return_value.__aenter__.return_value = session
        session_factory.return_value.__aexit__.return_value = False

        store = SQLAlbumStore(session_factory, operation_timeout=0.05)

        with pytest.raises(DatabaseError) as exc_info:
            await store.get_by_id(1)

        assert exc_info.value.context["operation"] == "get_by_id"
        assert exc_info.value.context["timeout"] == 0.05

    @pytest.mark.asyncio
    async def test_ping_succeeds_on_reachable_database(self, album_store):
        await album_store.ping()
