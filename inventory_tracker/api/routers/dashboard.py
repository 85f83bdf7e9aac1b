# inventory_tracker/api/routers/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.db.session_async import get_async_db
from inventory_tracker.schemas.history import DashboardStats
from inventory_tracker.services import dashboard_service

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(db: AsyncSession = Depends(get_async_db)):
    return await dashboard_service.get_stats(db)
