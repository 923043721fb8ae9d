"""Async SQLAlchemy engine and session helpers."""

from __future__ import annotations

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from .models import Base


def create_engine(database_url: str) -> AsyncEngine:
    """Create async SQLAlchemy engine for the provided database URL.

    In-memory SQLite URLs share a single connection so every session sees the
    same database.
    """

    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_async_engine(
            url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(url, pool_pre_ping=True)


def async_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build async session factory bound to the engine."""

    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables known to the metadata (tests and local runs)."""

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
