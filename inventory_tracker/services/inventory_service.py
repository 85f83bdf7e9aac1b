from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.domain.enums import ProductCategory, ProductStatus
from inventory_tracker.models.movement import InboundRecord
from inventory_tracker.models.product import PcDetails, Product, ProductType
from inventory_tracker.models.staff import Staff
from inventory_tracker.schemas.product import (
    ExistingProduct,
    InventoryItemRead,
    LatestLotNumberRead,
    PcDetailsRead,
    ProductCheckRead,
    ProductTypeRead,
    StaffRef,
)


async def list_product_types(db: AsyncSession, category: ProductCategory) -> list[ProductType]:
    stmt = (
        select(ProductType)
        .where(ProductType.category == ProductCategory(category))
        .order_by(ProductType.id.asc())
    )
    result = await db.execute(stmt)
    return result.scalars().all()


async def check_product_id(db: AsyncSession, category: ProductCategory, product_id: str) -> ProductCheckRead:
    """Report whether ``product_id`` can be shipped out from ``category``."""
    category = ProductCategory(category)
    stmt = (
        select(Product.status, ProductType.category, ProductType.name)
        .join(ProductType, Product.type_id == ProductType.id)
        .where(Product.product_id == product_id)
    )
    row = (await db.execute(stmt)).first()
    if row is None:
        return ProductCheckRead(
            exists=False,
            availability="unknown",
            message=f"Product id {product_id} does not exist",
        )

    status, product_category, type_name = row
    existing = ExistingProduct(category=product_category, type_name=type_name, status=status)
    if product_category != category:
        return ProductCheckRead(
            exists=False,
            availability="wrong_category",
            message=f"Product id {product_id} belongs to category {product_category.value}",
            existing_product=existing,
        )
    if status != ProductStatus.in_stock:
        return ProductCheckRead(
            exists=False,
            availability="out_of_stock",
            message=f"Product id {product_id} has already been shipped out",
            existing_product=existing,
        )
    return ProductCheckRead(
        exists=True,
        availability="available",
        message=f"Product id {product_id} ({type_name}) is in stock",
        existing_product=existing,
    )


async def list_inventory(db: AsyncSession, category: ProductCategory) -> list[InventoryItemRead]:
    category = ProductCategory(category)
    stmt = (
        select(Product, ProductType, PcDetails, Staff.id, Staff.name, InboundRecord.staff_id)
        .join(ProductType, Product.type_id == ProductType.id)
        .outerjoin(PcDetails, PcDetails.product_id == Product.product_id)
        .outerjoin(InboundRecord, InboundRecord.product_id == Product.product_id)
        .outerjoin(Staff, Staff.id == InboundRecord.staff_id)
        .where(ProductType.category == category)
        .order_by(Product.created_at.desc(), Product.id.desc())
    )
    rows = (await db.execute(stmt)).all()

    items: list[InventoryItemRead] = []
    seen: set[str] = set()
    for product, product_type, pc, staff_id, staff_name, ledger_staff_id in rows:
        if product.product_id in seen:
            continue
        seen.add(product.product_id)
        staff = None
        if ledger_staff_id is not None:
            staff = StaffRef(id=staff_id if staff_id is not None else ledger_staff_id, name=staff_name)
        items.append(
            InventoryItemRead(
                id=product.id,
                product_id=product.product_id,
                lot_number=product.lot_number,
                inbound_number=product.inbound_number,
                status=product.status,
                created_at=product.created_at,
                updated_at=product.updated_at,
                type=ProductTypeRead.model_validate(product_type),
                staff=staff,
                pc_details=(
                    PcDetailsRead.model_validate(pc)
                    if pc is not None and category == ProductCategory.pc
                    else None
                ),
            )
        )
    return items


async def latest_lot_number(db: AsyncSession, category: ProductCategory) -> LatestLotNumberRead:
    stmt = (
        select(Product.lot_number)
        .join(ProductType, Product.type_id == ProductType.id)
        .where(ProductType.category == ProductCategory(category))
        .order_by(Product.created_at.desc(), Product.id.desc())
        .limit(1)
    )
    lot_number = await db.scalar(stmt)
    if lot_number:
        return LatestLotNumberRead(lot_number=lot_number, message=f"Previous lot number: {lot_number}")
    return LatestLotNumberRead(lot_number=None, message="No previous lot number")
