# inventory_tracker/api/routers/pc_models.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.db.operations import commit_async, rollback_async
from inventory_tracker.db.session_async import get_async_db
from inventory_tracker.schemas.product import PcModelNumberCreate, PcModelNumberRead
from inventory_tracker.services import pc_model_service

router = APIRouter(prefix="/pc-model-numbers", tags=["pc-model-numbers"])


@router.get("", response_model=list[str])
async def list_model_numbers(db: AsyncSession = Depends(get_async_db)):
    entries = await pc_model_service.list_model_numbers(db)
    return [entry.model_number for entry in entries]


@router.post("", response_model=PcModelNumberRead, status_code=status.HTTP_201_CREATED)
async def add_model_number(payload: PcModelNumberCreate, db: AsyncSession = Depends(get_async_db)):
    try:
        entry = await pc_model_service.add_model_number(db, payload)
        await commit_async(db)
    except Exception:
        await rollback_async(db)
        raise
    return entry


@router.delete("/{model_number}")
async def delete_model_number(
    model_number: str = Path(..., min_length=1, max_length=100),
    db: AsyncSession = Depends(get_async_db),
):
    try:
        await pc_model_service.delete_model_number(db, model_number)
        await commit_async(db)
    except Exception:
        await rollback_async(db)
        raise
    return {"success": True}
