"""Movement ledger writes: product creation on inbound, one record per item and movement."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import date

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.db.operations import flush_async
from inventory_tracker.domain.enums import MovementType, ProductCategory, ProductStatus
from inventory_tracker.models.movement import InboundRecord, OutboundRecord
from inventory_tracker.models.product import PcDetails, Product, ProductType
from inventory_tracker.schemas.movement import InboundItem, OutboundMetadata
from inventory_tracker.services.exceptions import (
    DomainValidationError,
    DuplicateProductError,
    ResourceNotFoundError,
)


def _ledger_rows(
    movement_type: MovementType,
    document_number: str,
    product_ids: Sequence[str],
    staff_id: int,
    movement_date: date,
    metadata: OutboundMetadata | None,
) -> list[dict]:
    if movement_type == MovementType.inbound:
        return [
            {
                "product_id": product_id,
                "staff_id": staff_id,
                "inbound_number": document_number,
                "inbound_date": movement_date,
            }
            for product_id in product_ids
        ]

    extra = metadata.model_dump() if metadata else {}
    return [
        {
            "product_id": product_id,
            "staff_id": staff_id,
            "outbound_number": document_number,
            "outbound_date": movement_date,
            **extra,
        }
        for product_id in product_ids
    ]


async def record_movement(
    db: AsyncSession,
    movement_type: MovementType,
    document_number: str,
    product_ids: Sequence[str],
    staff_id: int,
    movement_date: date,
    metadata: OutboundMetadata | None = None,
) -> int:
    """Append one ledger row per product id, all sharing the document number."""
    movement_type = MovementType(movement_type)
    if not product_ids:
        raise DomainValidationError("A movement needs at least one product")
    if metadata is not None and movement_type == MovementType.inbound:
        raise DomainValidationError("Customer metadata only applies to outbound movements")

    model = InboundRecord if movement_type == MovementType.inbound else OutboundRecord
    rows = _ledger_rows(movement_type, document_number, product_ids, staff_id, movement_date, metadata)
    await db.execute(insert(model), rows)
    return len(rows)


async def _ensure_new_product_ids(db: AsyncSession, product_ids: list[str]) -> None:
    repeated = sorted(pid for pid, count in Counter(product_ids).items() if count > 1)
    if repeated:
        raise DuplicateProductError(
            f"Product ids repeated in the request: {', '.join(repeated)}", repeated
        )

    stmt = select(Product.product_id).where(Product.product_id.in_(product_ids))
    existing = sorted((await db.execute(stmt)).scalars().all())
    if existing:
        raise DuplicateProductError(
            f"Product ids already registered: {', '.join(existing)}", existing
        )


async def _ensure_types_in_category(db: AsyncSession, category: ProductCategory, type_ids: set[int]) -> None:
    stmt = (
        select(ProductType.id)
        .where(ProductType.id.in_(type_ids))
        .where(ProductType.category == category)
    )
    found = set((await db.execute(stmt)).scalars().all())
    missing = sorted(type_ids - found)
    if missing:
        raise ResourceNotFoundError(
            f"Product type(s) {', '.join(map(str, missing))} not found in category {category.value}"
        )


async def receive_products(
    db: AsyncSession,
    category: ProductCategory,
    document_number: str,
    items: Sequence[InboundItem],
    staff_id: int,
    inbound_date: date,
) -> list[str]:
    """Create every product of an inbound batch and its ledger row.

    Any failure aborts the whole batch; nothing is committed here.
    """
    category = ProductCategory(category)
    product_ids = [item.product_id for item in items]
    await _ensure_new_product_ids(db, product_ids)
    await _ensure_types_in_category(db, category, {item.type_id for item in items})

    for item in items:
        db.add(
            Product(
                product_id=item.product_id,
                type_id=item.type_id,
                lot_number=item.lot_number,
                inbound_number=document_number,
                status=ProductStatus.in_stock,
            )
        )
        # Model/serial details are only kept for PCs.
        if category == ProductCategory.pc and item.pc_details is not None:
            db.add(PcDetails(product_id=item.product_id, **item.pc_details.model_dump()))
    await flush_async(db)

    await record_movement(db, MovementType.inbound, document_number, product_ids, staff_id, inbound_date)
    return product_ids
