from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.domain.enums import ProductCategory, ProductStatus
from inventory_tracker.models.product import Product, ProductType
from inventory_tracker.services.exceptions import EmptyRangeError


async def transition_stock(
    db: AsyncSession,
    category: ProductCategory,
    type_id: int,
    start_id: str,
    end_id: str,
) -> list[str]:
    """Retire every in-stock product of ``type_id`` within ``[start_id, end_id]``.

    Single conditional UPDATE; the ``status = in_stock`` predicate is evaluated
    by the store, so a concurrent request that already retired an item simply
    does not see it. Returns the ids actually changed, sorted.
    """
    category = ProductCategory(category)
    category_types = select(ProductType.id).where(ProductType.category == category)
    stmt = (
        update(Product)
        .where(Product.type_id == type_id)
        .where(Product.type_id.in_(category_types))
        .where(Product.product_id >= start_id)
        .where(Product.product_id <= end_id)
        .where(Product.status == ProductStatus.in_stock)
        .values(status=ProductStatus.out_of_stock, updated_at=func.now())
        .returning(Product.product_id)
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(stmt)
    affected = sorted(result.scalars().all())
    if not affected:
        raise EmptyRangeError(f"No in-stock products found between {start_id} and {end_id}")
    return affected
