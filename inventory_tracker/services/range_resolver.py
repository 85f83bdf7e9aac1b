from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.domain.enums import ProductCategory, ProductStatus
from inventory_tracker.models.product import Product, ProductType
from inventory_tracker.services.exceptions import (
    RangeAlreadyRetiredError,
    RangeBoundaryNotFoundError,
    TypeMismatchError,
)


@dataclass(frozen=True)
class ResolvedRange:
    category: ProductCategory
    start_id: str
    end_id: str
    type_id: int
    type_name: str


async def _resolve_boundary(
    db: AsyncSession,
    category: ProductCategory,
    product_id: str,
    label: str,
) -> tuple[int, str]:
    stmt = (
        select(Product.type_id, ProductType.name, Product.status)
        .join(ProductType, Product.type_id == ProductType.id)
        .where(Product.product_id == product_id)
        .where(ProductType.category == category)
    )
    row = (await db.execute(stmt)).first()
    if row is None:
        raise RangeBoundaryNotFoundError(
            f"{label} product id {product_id} is not in stock for category {category.value}",
            product_id,
        )
    type_id, type_name, status = row
    if status != ProductStatus.in_stock:
        raise RangeAlreadyRetiredError(
            f"{label} product id {product_id} has already been shipped out",
            product_id,
        )
    return int(type_id), type_name


async def resolve_range(
    db: AsyncSession,
    category: ProductCategory,
    start_id: str,
    end_id: str,
) -> ResolvedRange:
    """Resolve the product type shared by both boundaries of an outbound range.

    Identifiers are opaque strings, so a lexical range may cover several types;
    the resolved type id scopes the bulk transition to a single one. No ordering
    between ``start_id`` and ``end_id`` is enforced.
    """
    category = ProductCategory(category)
    start_type_id, start_type_name = await _resolve_boundary(db, category, start_id, "Start")
    end_type_id, end_type_name = await _resolve_boundary(db, category, end_id, "End")

    if start_type_id != end_type_id:
        raise TypeMismatchError(start_type_name, end_type_name)

    return ResolvedRange(
        category=category,
        start_id=start_id,
        end_id=end_id,
        type_id=start_type_id,
        type_name=start_type_name,
    )
