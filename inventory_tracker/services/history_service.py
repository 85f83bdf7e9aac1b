from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.domain.enums import ProductCategory
from inventory_tracker.models.movement import InboundRecord, OutboundRecord
from inventory_tracker.models.product import PcDetails, Product, ProductType
from inventory_tracker.models.staff import Staff
from inventory_tracker.schemas.history import InboundHistoryRead, OutboundHistoryRead, TypeRef
from inventory_tracker.schemas.product import PcDetailsRead, StaffRef


def _pc_details(category: ProductCategory, pc: PcDetails | None) -> PcDetailsRead | None:
    if category != ProductCategory.pc or pc is None:
        return None
    return PcDetailsRead.model_validate(pc)


async def list_inbound_history(db: AsyncSession, category: ProductCategory) -> list[InboundHistoryRead]:
    category = ProductCategory(category)
    stmt = (
        select(InboundRecord, Product, ProductType, Staff.name, PcDetails)
        .join(Product, InboundRecord.product_id == Product.product_id)
        .join(ProductType, Product.type_id == ProductType.id)
        .outerjoin(Staff, Staff.id == InboundRecord.staff_id)
        .outerjoin(PcDetails, PcDetails.product_id == Product.product_id)
        .where(ProductType.category == category)
        .order_by(InboundRecord.inbound_date.desc(), InboundRecord.id.desc())
    )
    rows = (await db.execute(stmt)).all()
    return [
        InboundHistoryRead(
            id=record.id,
            inbound_number=record.inbound_number,
            inbound_date=record.inbound_date,
            product_id=product.product_id,
            lot_number=product.lot_number,
            type=TypeRef(id=product_type.id, name=product_type.name),
            staff=StaffRef(id=record.staff_id, name=staff_name),
            pc_details=_pc_details(category, pc),
        )
        for record, product, product_type, staff_name, pc in rows
    ]


async def list_outbound_history(db: AsyncSession, category: ProductCategory) -> list[OutboundHistoryRead]:
    category = ProductCategory(category)
    stmt = (
        select(OutboundRecord, Product, ProductType, Staff.name, PcDetails)
        .join(Product, OutboundRecord.product_id == Product.product_id)
        .join(ProductType, Product.type_id == ProductType.id)
        .outerjoin(Staff, Staff.id == OutboundRecord.staff_id)
        .outerjoin(PcDetails, PcDetails.product_id == Product.product_id)
        .where(ProductType.category == category)
        .order_by(OutboundRecord.outbound_date.desc(), OutboundRecord.id.desc())
    )
    rows = (await db.execute(stmt)).all()
    return [
        OutboundHistoryRead(
            id=record.id,
            outbound_number=record.outbound_number,
            outbound_date=record.outbound_date,
            product_id=product.product_id,
            lot_number=product.lot_number,
            type=TypeRef(id=product_type.id, name=product_type.name),
            staff=StaffRef(id=record.staff_id, name=staff_name),
            customer_number=record.customer_number,
            customer_name=record.customer_name,
            purchaser_number=record.purchaser_number,
            purchaser_name=record.purchaser_name,
            notes=record.notes,
            pc_details=_pc_details(category, pc),
        )
        for record, product, product_type, staff_name, pc in rows
    ]
