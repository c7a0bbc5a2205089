"""
Database Engine and Session Management

Async SQLAlchemy engine and session factory for the Cinedex PostgreSQL store.
The engine is created lazily on first use and disposed on shutdown.
"""

import logging
import ssl
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cinedex.config import Settings, get_settings
from cinedex.models.orm import Base  # noqa: F401 - registers all mappers

logger = logging.getLogger(__name__)


def split_ssl_mode(url: str) -> tuple[str, dict]:
    """
    Move a libpq-style ``sslmode`` query parameter into asyncpg connect args.

    asyncpg rejects ``sslmode`` in the URL, so it is stripped and translated
    into the ``ssl`` connect argument.

    Args:
        url: PostgreSQL database URL

    Returns:
        Tuple of (url without sslmode, connect_args)
    """
    parsed = urlparse(url)
    query_params = parse_qs(parsed.query)
    connect_args: dict = {}

    sslmode = query_params.pop("sslmode", [None])[0]
    if sslmode in ("require", "verify-ca", "verify-full"):
        context = ssl.create_default_context()
        if sslmode != "verify-full":
            context.check_hostname = False
        if sslmode == "require":
            context.verify_mode = ssl.CERT_NONE
        connect_args["ssl"] = context
    elif sslmode == "prefer":
        connect_args["ssl"] = "prefer"

    cleaned = urlunparse(parsed._replace(query=urlencode(query_params, doseq=True)))
    return cleaned, connect_args


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine(settings: Settings | None = None) -> AsyncEngine:
    """Get or create the async engine."""
    global _engine

    if _engine is None:
        settings = settings or get_settings()
        db_url, connect_args = split_ssl_mode(settings.database_url)
        _engine = create_async_engine(
            db_url,
            echo=settings.debug,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
            connect_args=connect_args,
        )

    return _engine


def get_session_factory(settings: Settings | None = None) -> async_sessionmaker[AsyncSession]:
    """Get or create the async session factory."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(settings),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Session scope for code running outside a request.

    Commits when the block exits cleanly and rolls back on any exception.

    Usage:
        async with get_db_context() as db:
            await db.execute(select(Movie))
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request."""
    async with get_db_context() as session:
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db)]


async def init_db() -> None:
    """Verify connectivity on application startup."""
    async with get_engine().begin() as conn:
        await conn.run_sync(lambda _: None)


async def close_db() -> None:
    """Dispose of pooled connections on application shutdown."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None


def reset_db_state() -> None:
    """Forget the engine and session factory so tests pick up fresh settings."""
    global _engine, _session_factory
    _engine = None
    _session_factory = None
