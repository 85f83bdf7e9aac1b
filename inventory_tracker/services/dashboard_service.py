from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.core.config import settings
from inventory_tracker.domain.enums import ProductStatus
from inventory_tracker.models.movement import InboundRecord, OutboundRecord
from inventory_tracker.models.product import Product, ProductType
from inventory_tracker.models.staff import Staff
from inventory_tracker.schemas.history import DashboardStats, RecentActivity


async def _recent(db: AsyncSession, model, kind: str, date_column, limit: int) -> list[RecentActivity]:
    stmt = (
        select(
            date_column,
            model.created_at,
            Product.product_id,
            ProductType.category,
            Staff.name,
        )
        .join(Product, model.product_id == Product.product_id)
        .join(ProductType, Product.type_id == ProductType.id)
        .outerjoin(Staff, Staff.id == model.staff_id)
        .order_by(date_column.desc(), model.id.desc())
        .limit(limit)
    )
    rows = (await db.execute(stmt)).all()
    return [
        RecentActivity(
            type=kind,
            movement_date=movement_date,
            recorded_at=recorded_at,
            product_id=product_id,
            category=category,
            staff_name=staff_name,
        )
        for movement_date, recorded_at, product_id, category, staff_name in rows
    ]


async def get_stats(db: AsyncSession, limit: int | None = None) -> DashboardStats:
    limit = limit or settings.RECENT_ACTIVITY_LIMIT
    total = await db.scalar(
        select(func.count()).select_from(Product).where(Product.status == ProductStatus.in_stock)
    )

    by_category_stmt = (
        select(ProductType.category, func.count(Product.id))
        .join(ProductType, Product.type_id == ProductType.id)
        .where(Product.status == ProductStatus.in_stock)
        .group_by(ProductType.category)
    )
    by_category = {
        category.value: int(count) for category, count in (await db.execute(by_category_stmt)).all()
    }

    activities = await _recent(db, InboundRecord, "inbound", InboundRecord.inbound_date, limit)
    activities += await _recent(db, OutboundRecord, "outbound", OutboundRecord.outbound_date, limit)
    activities.sort(key=lambda a: (a.movement_date, a.recorded_at), reverse=True)

    return DashboardStats(
        total_products=int(total or 0),
        by_category=by_category,
        recent_activities=activities,
    )
