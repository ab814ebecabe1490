"""
Database Session Management
===========================

Async SQLAlchemy engine and session handling.

The engine is created lazily so that tests and tooling can point
DATABASE_URL somewhere else before the first connection is made.
"""

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from vehicle_inspection.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()

_engine: Optional[AsyncEngine] = None

# Bound to the engine on first use
AsyncSessionLocal = async_sessionmaker(class_=AsyncSession, expire_on_commit=False, autoflush=False)


def _create_engine_for_url(database_url: str) -> AsyncEngine:
    if database_url.startswith("sqlite"):
        return create_async_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=settings.SQL_ECHO,
        )

    return create_async_engine(
        database_url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        echo=settings.SQL_ECHO,
    )


def get_engine() -> AsyncEngine:
    """
    Get the SQLAlchemy engine for DATABASE_URL.

    The engine is bound once. Changing DATABASE_URL afterwards has no effect
    until dispose_engine() has closed the current pool.
    """
    global _engine
    if _engine is None:
        _engine = _create_engine_for_url(settings.DATABASE_URL)
        AsyncSessionLocal.configure(bind=_engine)
    return _engine


async def dispose_engine():
    """Close pooled connections and forget the engine."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    AsyncSessionLocal.configure(bind=None)


async def init_db():
    """Create tables that do not exist yet."""
    # Import models so they register on Base.metadata
    from vehicle_inspection.models import db_models  # noqa: F401

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for FastAPI to get a database session.

    Usage:
        @router.get("/items")
        async def read_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    get_engine()
    async with AsyncSessionLocal() as session:
        yield session
