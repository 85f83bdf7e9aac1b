from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.core.logging import get_logger
from inventory_tracker.db.operations import flush_async, refresh_async
from inventory_tracker.models.staff import Staff
from inventory_tracker.schemas.staff import StaffCreate
from inventory_tracker.services.exceptions import DomainValidationError, ResourceNotFoundError

logger = get_logger("inventory_tracker.staff")


async def list_staff(db: AsyncSession) -> list[Staff]:
    result = await db.execute(select(Staff).order_by(Staff.id.asc()))
    return result.scalars().all()


async def create_staff(db: AsyncSession, payload: StaffCreate) -> Staff:
    name = payload.name.strip()
    if not name:
        raise DomainValidationError("Staff name must not be blank")
    staff = Staff(name=name)
    db.add(staff)
    await flush_async(db, staff)
    await refresh_async(db, staff)
    logger.info("Staff created", extra={"staff_id": staff.id})
    return staff


async def get_staff_or_raise(db: AsyncSession, staff_id: int) -> Staff:
    staff = await db.get(Staff, staff_id)
    if staff is None:
        raise ResourceNotFoundError(f"Staff {staff_id} not found")
    return staff


async def delete_staff(db: AsyncSession, staff_id: int) -> bool:
    # Ledger rows keep the id of deleted staff; history shows them without a name.
    result = await db.execute(delete(Staff).where(Staff.id == staff_id))
    deleted = bool(result.rowcount)
    logger.info("Staff delete requested", extra={"staff_id": staff_id, "deleted": deleted})
    return deleted
