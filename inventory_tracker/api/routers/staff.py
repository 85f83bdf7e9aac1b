# inventory_tracker/api/routers/staff.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.db.operations import commit_async, rollback_async
from inventory_tracker.db.session_async import get_async_db
from inventory_tracker.schemas.staff import StaffCreate, StaffRead
from inventory_tracker.services import staff_service
from inventory_tracker.services.exceptions import ResourceNotFoundError

router = APIRouter(prefix="/staff", tags=["staff"])


@router.get("", response_model=list[StaffRead])
async def list_staff(db: AsyncSession = Depends(get_async_db)):
    return await staff_service.list_staff(db)


@router.post("", response_model=StaffRead, status_code=status.HTTP_201_CREATED)
async def create_staff(payload: StaffCreate, db: AsyncSession = Depends(get_async_db)):
    try:
        staff = await staff_service.create_staff(db, payload)
        await commit_async(db)
    except Exception:
        await rollback_async(db)
        raise
    return staff


@router.delete("/{staff_id}")
async def delete_staff(
    staff_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_async_db),
):
    try:
        deleted = await staff_service.delete_staff(db, staff_id)
        await commit_async(db)
    except Exception:
        await rollback_async(db)
        raise
    if not deleted:
        raise ResourceNotFoundError(f"Staff {staff_id} not found")
    return {"message": "Staff deleted"}
