"""Database connection and session management.

Provides the async engine and session factory backing the binding store.
PostgreSQL (asyncpg) in production, SQLite (aiosqlite) for local runs.
"""

import logfire
from sqlalchemy import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from nameguard.config import Settings
from nameguard.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with store parameters

    Returns:
        Configured async engine
    """
    store = settings.store
    url = make_url(store.dsn)

    if url.get_backend_name() == "sqlite":
        # SQLite picks its own pool class; sizing arguments are rejected.
        # Queries run in a worker thread that cancellation cannot interrupt,
        # so the busy timeout is what bounds a blocked operation.
        return create_async_engine(
            url,
            echo=settings.debug,
            connect_args={
                "timeout": min(store.connect_timeout, store.operation_timeout)
            },
        )

    return create_async_engine(
        url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=store.pool_size,
        max_overflow=store.max_overflow,
        pool_timeout=store.connect_timeout,  # Wait for a free pooled connection
        connect_args={"timeout": store.connect_timeout},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


async def provision_schema(engine: AsyncEngine) -> None:
    """Create the players table if it does not exist.

    Idempotent bootstrap for local SQLite stores and tests. Production
    PostgreSQL schemas are managed by Alembic migrations.

    Args:
        engine: Database engine
    """
    with logfire.span("provision_schema", backend=engine.dialect.name):
        async with engine.begin() as connection:
            await connection.run_sync(metadata.create_all, checkfirst=True)
        logfire.info("Schema provisioned", backend=engine.dialect.name)
