from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.db.operations import flush_async, refresh_async
from inventory_tracker.models.product import PcDetails, PcModelNumber
from inventory_tracker.schemas.product import PcModelNumberCreate
from inventory_tracker.services.exceptions import ConflictError, ResourceNotFoundError


async def list_model_numbers(db: AsyncSession) -> list[PcModelNumber]:
    result = await db.execute(select(PcModelNumber).order_by(PcModelNumber.model_number.asc()))
    return result.scalars().all()


async def add_model_number(db: AsyncSession, payload: PcModelNumberCreate) -> PcModelNumber:
    model_number = payload.model_number.strip()
    exists = await db.scalar(
        select(PcModelNumber.id).where(PcModelNumber.model_number == model_number).limit(1)
    )
    if exists:
        raise ConflictError(f"Model number {model_number} is already registered")

    entry = PcModelNumber(model_number=model_number)
    db.add(entry)
    await flush_async(db, entry)
    await refresh_async(db, entry)
    return entry


async def delete_model_number(db: AsyncSession, model_number: str) -> None:
    in_use = await db.scalar(
        select(PcDetails.id).where(PcDetails.model_number == model_number).limit(1)
    )
    if in_use:
        raise ConflictError(f"Model number {model_number} is in use and cannot be deleted")

    result = await db.execute(delete(PcModelNumber).where(PcModelNumber.model_number == model_number))
    if not result.rowcount:
        raise ResourceNotFoundError(f"Model number {model_number} not found")
