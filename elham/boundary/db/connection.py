"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, and FastAPI
dependency for database session injection.

Dependencies: sqlalchemy, elham.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from elham.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create the async SQLAlchemy engine.

    Pool sizing applies to server databases only; SQLite URLs use the
    driver's default pool. pool_pre_ping=True verifies connections
    before use to detect stale connections early.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine, shared per process
    """
    db_config = get_settings().database

    if db_config.is_sqlite:
        return create_async_engine(db_config.async_database_url, echo=db_config.echo_sql)

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker:
    """
    Create async session factory for database operations.

    Returns:
        async_sessionmaker: Factory with autoflush disabled and
        expire_on_commit=False so loaded rows stay readable after commit
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one request-scoped session.

    The unit of work is committed when the route returns normally and
    rolled back when it raises.

    Yields:
        AsyncSession: Async SQLAlchemy session scoped to the request

    Usage:
        @router.get("/hotels/{id}")
        async def get_hotel(id: UUID, db: AsyncSession = Depends(get_async_db)):
            return await hotel_crud.get_by_id(db, id)
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
