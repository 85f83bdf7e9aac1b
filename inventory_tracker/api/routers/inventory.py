# inventory_tracker/api/routers/inventory.py
from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.db.session_async import get_async_db
from inventory_tracker.domain.enums import ProductCategory
from inventory_tracker.schemas.product import (
    InventoryItemRead,
    LatestLotNumberRead,
    ProductCheckRead,
    ProductTypeRead,
)
from inventory_tracker.services import inventory_service

router = APIRouter(tags=["inventory"])


@router.get("/inventory/{category}", response_model=list[InventoryItemRead])
async def list_inventory(
    category: ProductCategory = Path(..., description="Product category"),
    db: AsyncSession = Depends(get_async_db),
):
    return await inventory_service.list_inventory(db, category)


@router.get(
    "/inventory/{category}/check-product-id/{product_id}",
    response_model=ProductCheckRead,
)
async def check_product_id(
    category: ProductCategory = Path(..., description="Product category"),
    product_id: str = Path(..., min_length=1, max_length=100),
    db: AsyncSession = Depends(get_async_db),
):
    return await inventory_service.check_product_id(db, category, product_id)


@router.get("/product-types/{category}", response_model=list[ProductTypeRead])
async def list_product_types(
    category: ProductCategory = Path(..., description="Product category"),
    db: AsyncSession = Depends(get_async_db),
):
    return await inventory_service.list_product_types(db, category)


@router.get("/latest-lot-number/{category}", response_model=LatestLotNumberRead)
async def latest_lot_number(
    category: ProductCategory = Path(..., description="Product category"),
    db: AsyncSession = Depends(get_async_db),
):
    return await inventory_service.latest_lot_number(db, category)
