# inventory_tracker/db/operations.py
"""Session helpers shared by the CRUD routers and services."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession


async def commit_async(session: AsyncSession) -> None:
    await session.commit()


async def rollback_async(session: AsyncSession) -> None:
    # Nothing to undo when the request failed before touching the database.
    if session.in_transaction():
        await session.rollback()


async def flush_async(session: AsyncSession, *objects: Any) -> None:
    await session.flush(list(objects) or None)


async def refresh_async(session: AsyncSession, *instances: Any) -> None:
    for instance in instances:
        await session.refresh(instance)
