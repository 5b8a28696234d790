"""
Recordings API: Album Store (Data Access Layer)
================================================

What:  The AlbumStore interface and its SQLAlchemy implementation.
How:   Each operation opens its own session, issues exactly one
       parameterized SQL statement and maps driver failures onto the
       application's exception hierarchy.
Who:   Route handlers receive an AlbumStore through the get_album_store
       dependency; the lifespan in main.py builds the SQLAlbumStore.

Operations:
    create(album)         INSERT INTO album (title, artist, price) VALUES (...)
    get_by_id(album_id)   SELECT ... FROM album WHERE id = :id
    list_by_artist(name)  SELECT ... FROM album WHERE artist = :artist
    ping()                SELECT 1

Error Handling Strategy:
    - Zero rows on a primary-key lookup → NotFoundError
    - Anything the driver raises        → DatabaseError (driver text in context)
    - Operation deadline exceeded       → DatabaseError
    Cancellation of the calling request is not caught here; it unwinds
    through the session context manager, which returns the connection.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Protocol, TypeVar

from sqlalchemy import insert, select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.requests import Request

from recordings.exceptions import DatabaseError, NotFoundError, RecordingsError
from recordings.models.album import Album
from recordings.schemas.album import AlbumCreate, AlbumResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AlbumStore(Protocol):
    """Operations the HTTP layer needs from the album table."""

    async def create(self, album: AlbumCreate) -> int: ...

    async def get_by_id(self, album_id: int) -> AlbumResponse: ...

    async def list_by_artist(self, name: str) -> List[AlbumResponse]: ...

    async def ping(self) -> None: ...


class SQLAlbumStore:
    """
    AlbumStore backed by an async SQLAlchemy session factory.

    The store holds no per-request state; the session factory (and the
    engine pool behind it) is the only shared resource, and it is safe for
    concurrent use.

    Args:
        session_factory: async_sessionmaker bound to the application engine
        operation_timeout: seconds allowed for one operation, end to end
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        operation_timeout: float = 10.0,
    ):
        self._session_factory = session_factory
        self._operation_timeout = operation_timeout

    async def create(self, album: AlbumCreate) -> int:
        """
        Insert a new album and return the store-generated ID.

        The `id` carried by the request body is never written.

        Raises:
            DatabaseError: Insert failed or no key was generated
        """
        statement = insert(Album.__table__).values(
            title=album.title,
            artist=album.artist,
            price=album.price,
        )

        async def work() -> int:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(statement)
                return int(result.inserted_primary_key[0])

        album_id = await self._run("create", work, title=album.title, artist=album.artist)
        logger.info("Album created: id=%d artist=%s", album_id, album.artist)
        return album_id

    async def get_by_id(self, album_id: int) -> AlbumResponse:
        """
        Fetch one album by primary key.

        Raises:
            NotFoundError: No album has this ID (→ 404)
            DatabaseError: Query execution or row decoding failed (→ 500)
        """
        statement = select(Album).where(Album.id == album_id)

        async def work() -> AlbumResponse:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                row = result.scalar_one_or_none()
                if row is None:
                    raise NotFoundError(resource="album", resource_id=str(album_id))
                return AlbumResponse.model_validate(row)

        return await self._run("get_by_id", work, album_id=album_id)

    async def list_by_artist(self, name: str) -> List[AlbumResponse]:
        """
        Fetch every album whose artist equals ``name`` exactly.

        Returns an empty list when nothing matches. A failure while
        fetching or decoding any row fails the whole call; partial
        results are never returned.
        """
        statement = select(Album).where(Album.artist == name).order_by(Album.id)

        async def work() -> List[AlbumResponse]:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                return [AlbumResponse.model_validate(row) for row in result.scalars().all()]

        albums = await self._run("list_by_artist", work, artist=name)
        logger.debug("Found %d albums for artist %s", len(albums), name)
        return albums

    async def ping(self) -> None:
        """Round-trip a trivial query to prove the store is reachable."""

        async def work() -> None:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))

        await self._run("ping", work)

    async def _run(self, operation: str, work: Callable[[], Awaitable[T]], **context) -> T:
        """
        Execute ``work`` under the operation deadline and translate failures.

        Application exceptions (NotFoundError) pass through untouched.
        Everything else becomes a DatabaseError whose context carries the
        operation name and the original error for server-side logging.
        """
        try:
            return await asyncio.wait_for(work(), timeout=self._operation_timeout)
        except RecordingsError:
            raise
        except asyncio.TimeoutError:
            logger.error(
                "Album store %s exceeded %.1fs deadline", operation, self._operation_timeout
            )
            raise DatabaseError(
                message="The database did not respond in time. Please try again.",
                context={"operation": operation, "timeout": self._operation_timeout, **context},
            )
        except Exception as e:
            logger.error("Album store %s failed: %s", operation, str(e))
            raise DatabaseError(
                context={
                    "operation": operation,
                    "original_error": str(e),
                    "error_type": type(e).__name__,
                    **context,
                },
            ) from e


# ── FastAPI Dependency ────────────────────────────────────────────────────
def get_album_store(request: Request) -> AlbumStore:
    """
    Resolve the store attached to the running application.

    Route handlers declare ``store: AlbumStore = Depends(get_album_store)``;
    tests swap the store by passing their own to create_app().
    """
    return request.app.state.album_store
