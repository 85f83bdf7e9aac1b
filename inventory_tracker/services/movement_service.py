"""Inbound/outbound movements: the entry points used by the HTTP layer.

Inbound:  allocate document number -> create products -> ledger rows.
Outbound: allocate document number -> resolve range -> retire items -> ledger rows.
Both run inside one transaction per request (see ``services.transaction``).
"""

from __future__ import annotations

import enum
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.core.logging import get_logger
from inventory_tracker.core.metrics import record_movement_outcome
from inventory_tracker.domain.enums import MovementType, ProductCategory
from inventory_tracker.schemas.movement import (
    InboundCreate,
    InboundResult,
    OutboundCreate,
    OutboundResult,
)
from inventory_tracker.services import staff_service
from inventory_tracker.services.document_numbers import allocate_document_number
from inventory_tracker.services.exceptions import ServiceError
from inventory_tracker.services.ledger import receive_products, record_movement
from inventory_tracker.services.range_resolver import resolve_range
from inventory_tracker.services.stock_transition import transition_stock
from inventory_tracker.services.transaction import run_movement_transaction

logger = get_logger("inventory_tracker.movements")


class OutboundStage(str, enum.Enum):
    open = "open"
    range_resolved = "range_resolved"
    transitioning = "transitioning"
    ledger_written = "ledger_written"
    committed = "committed"
    aborted = "aborted"


async def process_inbound(
    db: AsyncSession,
    category: ProductCategory,
    payload: InboundCreate,
    *,
    issued_on: date | None = None,
) -> InboundResult:
    """Register a batch of new products; all of them or none."""
    category = ProductCategory(category)
    issued_on = issued_on or date.today()

    async def _operation(session: AsyncSession) -> InboundResult:
        await staff_service.get_staff_or_raise(session, payload.staff_id)
        document_number = await allocate_document_number(session, MovementType.inbound, issued_on)
        logger.debug("Inbound number allocated", extra={"document_number": document_number})
        product_ids = await receive_products(
            session,
            category,
            document_number,
            payload.products,
            payload.staff_id,
            payload.inbound_date,
        )
        return InboundResult(document_number=document_number, product_ids=product_ids)

    try:
        result = await run_movement_transaction(db, _operation, movement_type=MovementType.inbound)
    except ServiceError as exc:
        record_movement_outcome(MovementType.inbound.value, exc.code)
        logger.warning(
            "Inbound movement aborted",
            extra={"category": category.value, "code": exc.code, "detail": exc.detail},
        )
        raise

    record_movement_outcome(MovementType.inbound.value, "committed", len(result.product_ids))
    logger.info(
        "Inbound movement committed",
        extra={
            "category": category.value,
            "document_number": result.document_number,
            "count": len(result.product_ids),
        },
    )
    return result


async def process_outbound(
    db: AsyncSession,
    category: ProductCategory,
    payload: OutboundCreate,
    *,
    issued_on: date | None = None,
) -> OutboundResult:
    """Ship out every in-stock item of one type within ``[start, end]``."""
    category = ProductCategory(category)
    issued_on = issued_on or date.today()
    stage = OutboundStage.open

    def _advance(next_stage: OutboundStage, **details) -> None:
        nonlocal stage
        stage = next_stage
        logger.debug("Outbound stage", extra={"stage": stage.value, **details})

    async def _operation(session: AsyncSession) -> OutboundResult:
        await staff_service.get_staff_or_raise(session, payload.staff_id)
        document_number = await allocate_document_number(session, MovementType.outbound, issued_on)

        resolved = await resolve_range(session, category, payload.product_id_start, payload.product_id_end)
        _advance(OutboundStage.range_resolved, document_number=document_number, type_id=resolved.type_id)

        _advance(OutboundStage.transitioning, document_number=document_number)
        affected = await transition_stock(
            session, category, resolved.type_id, resolved.start_id, resolved.end_id
        )

        await record_movement(
            session,
            MovementType.outbound,
            document_number,
            affected,
            payload.staff_id,
            payload.outbound_date,
            payload.metadata(),
        )
        _advance(OutboundStage.ledger_written, document_number=document_number, count=len(affected))
        return OutboundResult(
            document_number=document_number,
            processed_count=len(affected),
            products=affected,
        )

    try:
        result = await run_movement_transaction(db, _operation, movement_type=MovementType.outbound)
    except ServiceError as exc:
        failed_stage = stage.value
        _advance(OutboundStage.aborted, failed_stage=failed_stage)
        record_movement_outcome(MovementType.outbound.value, exc.code)
        logger.warning(
            "Outbound movement aborted",
            extra={
                "category": category.value,
                "failed_stage": failed_stage,
                "code": exc.code,
                "detail": exc.detail,
            },
        )
        raise

    _advance(OutboundStage.committed, document_number=result.document_number)
    record_movement_outcome(MovementType.outbound.value, OutboundStage.committed.value, result.processed_count)
    logger.info(
        "Outbound movement committed",
        extra={
            "category": category.value,
            "document_number": result.document_number,
            "count": result.processed_count,
            "range": [payload.product_id_start, payload.product_id_end],
        },
    )
    return result
