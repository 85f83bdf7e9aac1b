"""Date-scoped document numbers (``YYYYMMDD-NNNN``) for inbound/outbound batches.

The next sequence is derived from the highest number already recorded for the
day in the movement type's ledger table. The read must run on the session that
later inserts the ledger rows, inside the movement transaction. Allocation also
registers the number in ``movement_documents``, whose unique key makes the
second of two requests that computed the same ``max + 1`` fail instead of
reusing the number. Numbers of aborted transactions are never visible.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import Integer, cast, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.domain.enums import MovementType
from inventory_tracker.models.movement import InboundRecord, MovementDocument, OutboundRecord
from inventory_tracker.services.exceptions import DocumentSequenceExhaustedError

MAX_SEQUENCE = 9999

# "YYYYMMDD-" is 9 characters; the sequence starts at position 10 (1-based).
_SEQUENCE_OFFSET = 10

_NUMBER_COLUMNS = {
    MovementType.inbound: InboundRecord.inbound_number,
    MovementType.outbound: OutboundRecord.outbound_number,
}


def date_prefix(on_date: date) -> str:
    return on_date.strftime("%Y%m%d")


def format_document_number(on_date: date, sequence: int) -> str:
    if sequence < 1 or sequence > MAX_SEQUENCE:
        raise DocumentSequenceExhaustedError(
            f"Document sequence {sequence} is outside 1..{MAX_SEQUENCE} for {date_prefix(on_date)}"
        )
    return f"{date_prefix(on_date)}-{sequence:04d}"


async def next_sequence(db: AsyncSession, movement_type: MovementType, on_date: date) -> int:
    column = _NUMBER_COLUMNS[MovementType(movement_type)]
    stmt = select(
        func.coalesce(func.max(cast(func.substr(column, _SEQUENCE_OFFSET), Integer)), 0)
    ).where(column.like(f"{date_prefix(on_date)}-%"))
    last = await db.scalar(stmt)
    return int(last or 0) + 1


async def allocate_document_number(db: AsyncSession, movement_type: MovementType, on_date: date) -> str:
    movement_type = MovementType(movement_type)
    sequence = await next_sequence(db, movement_type, on_date)
    number = format_document_number(on_date, sequence)
    await db.execute(
        insert(MovementDocument).values(
            movement_type=movement_type,
            document_number=number,
            issued_on=on_date,
        )
    )
    return number
