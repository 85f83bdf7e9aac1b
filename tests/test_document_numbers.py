# tests/test_document_numbers.py
from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.domain.enums import MovementType
from inventory_tracker.services import document_numbers
from inventory_tracker.services.exceptions import DocumentSequenceExhaustedError

DAY = date(2024, 1, 1)


def test_format_document_number_pads_sequence():
    assert document_numbers.format_document_number(DAY, 1) == "20240101-0001"
    assert document_numbers.format_document_number(date(2024, 12, 31), 42) == "20241231-0042"
    assert document_numbers.format_document_number(DAY, 9999) == "20240101-9999"


@pytest.mark.parametrize("sequence", [0, 10000])
def test_format_document_number_refuses_out_of_range(sequence):
    with pytest.raises(DocumentSequenceExhaustedError):
        document_numbers.format_document_number(DAY, sequence)


@pytest.mark.asyncio
async def test_next_sequence_starts_at_one(async_db_session: AsyncSession):
    assert await document_numbers.next_sequence(async_db_session, MovementType.inbound, DAY) == 1
    assert await document_numbers.next_sequence(async_db_session, MovementType.outbound, DAY) == 1


@pytest.mark.asyncio
async def test_next_sequence_follows_highest_number_of_the_day(
    async_db_session: AsyncSession, vest_type, staff_member, make_products
):
    make_products(vest_type, ["V-1"], inbound_number="20240101-0007", staff_id=staff_member.id)
    make_products(vest_type, ["V-2"], inbound_number="20240102-0030", staff_id=staff_member.id)

    assert await document_numbers.next_sequence(async_db_session, MovementType.inbound, DAY) == 8
    assert await document_numbers.next_sequence(async_db_session, MovementType.inbound, date(2024, 1, 2)) == 31
    # Outbound numbers are an independent series.
    assert await document_numbers.next_sequence(async_db_session, MovementType.outbound, DAY) == 1


@pytest.mark.asyncio
async def test_allocate_refuses_when_day_is_exhausted(
    async_db_session: AsyncSession, vest_type, staff_member, make_products
):
    make_products(vest_type, ["V-1"], inbound_number="20240101-9999", staff_id=staff_member.id)

    with pytest.raises(DocumentSequenceExhaustedError):
        await document_numbers.allocate_document_number(async_db_session, MovementType.inbound, DAY)
