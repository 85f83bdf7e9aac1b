# inventory_tracker/db/session_async.py
"""Async engine and the per-request session dependency.

Every HTTP request gets its own ``AsyncSession``; movement endpoints hand it to
the transaction coordinator untouched, so no query may run on it beforehand.
"""

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from inventory_tracker.core.config import settings
from inventory_tracker.db.session import connect_args_for


async_engine: AsyncEngine = create_async_engine(
    settings.ASYNC_DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args_for(settings.ASYNC_DATABASE_URL),
)

AsyncSessionLocal = async_sessionmaker(
    bind=async_engine,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_db() -> AsyncIterator[AsyncSession]:
    async with AsyncSessionLocal() as session:
        yield session
