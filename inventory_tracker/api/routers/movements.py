# inventory_tracker/api/routers/movements.py
from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.db.session_async import get_async_db
from inventory_tracker.domain.enums import ProductCategory
from inventory_tracker.schemas.history import InboundHistoryRead, OutboundHistoryRead
from inventory_tracker.schemas.movement import (
    InboundCreate,
    InboundResult,
    OutboundCreate,
    OutboundResult,
)
from inventory_tracker.services import history_service, movement_service

router = APIRouter(tags=["movements"])


@router.post("/inbound/{category}", response_model=InboundResult)
async def create_inbound(
    payload: InboundCreate,
    category: ProductCategory = Path(..., description="Product category"),
    db: AsyncSession = Depends(get_async_db),
):
    return await movement_service.process_inbound(db, category, payload)


@router.post("/outbound/{category}", response_model=OutboundResult)
async def create_outbound(
    payload: OutboundCreate,
    category: ProductCategory = Path(..., description="Product category"),
    db: AsyncSession = Depends(get_async_db),
):
    return await movement_service.process_outbound(db, category, payload)


@router.get("/inbound/{category}/history", response_model=list[InboundHistoryRead])
async def inbound_history(
    category: ProductCategory = Path(..., description="Product category"),
    db: AsyncSession = Depends(get_async_db),
):
    return await history_service.list_inbound_history(db, category)


@router.get("/outbound/{category}/history", response_model=list[OutboundHistoryRead])
async def outbound_history(
    category: ProductCategory = Path(..., description="Product category"),
    db: AsyncSession = Depends(get_async_db),
):
    return await history_service.list_outbound_history(db, category)
