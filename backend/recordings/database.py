"""
Recordings API: Database Engine and Session Management
=======================================================

What:  Async SQLAlchemy engine factory, session factory and declarative base.
How:   build_engine() creates an async engine with connection pooling from
       Settings; build_session_factory() wraps it in an async_sessionmaker.
Who:   Called by the application lifespan; tests call them with SQLite settings.
When:  Once at server startup. Sessions are opened per store operation.

There is no module-level engine. The engine and the store built on top of it
live on `app.state`.

Connection Pooling:
    pool_size / max_overflow: taken from Settings
    pool_pre_ping:            validates connections before use
    pool_recycle=3600:        recycles connections every hour (MySQL closes
                              idle connections after wait_timeout)
"""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from recordings.config import Settings

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


# ── Engine Configuration ──────────────────────────────────────────────────
def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine described by ``settings``.

    Pool sizing arguments are only passed to server databases. SQLite
    dialects pick their own pool class, some of which reject them.
    """
    url = settings.sqlalchemy_url
    engine_kwargs = {
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if url.get_backend_name() != "sqlite":
        engine_kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )

    logger.debug("Creating database engine for %s", settings.safe_database_url)
    return create_async_engine(url, **engine_kwargs)


# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after the session commits
def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
