# tests/test_inbound.py
import asyncio
from datetime import date

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.db.session_async import AsyncSessionLocal
from inventory_tracker.domain.enums import MovementType, ProductCategory, ProductStatus
from inventory_tracker.models.movement import InboundRecord, MovementDocument
from inventory_tracker.models.product import PcDetails, Product
from inventory_tracker.schemas.movement import InboundCreate
from inventory_tracker.services import movement_service
from inventory_tracker.services.exceptions import DuplicateProductError, ResourceNotFoundError, StorageError

DAY = date(2024, 1, 1)


def _payload(staff_id: int, products: list[dict], inbound_date: date = DAY) -> InboundCreate:
    return InboundCreate(staff_id=staff_id, inbound_date=inbound_date, products=products)


async def _inbound(category, payload, issued_on=DAY):
    async with AsyncSessionLocal() as session:
        return await movement_service.process_inbound(session, category, payload, issued_on=issued_on)


@pytest.mark.asyncio
async def test_inbound_numbers_increase_within_the_day(
    async_db_session: AsyncSession, vest_type, staff_member
):
    first = await _inbound(
        ProductCategory.vest,
        _payload(
            staff_member.id,
            [
                {"product_id": "V-001", "type_id": vest_type.id, "lot_number": "L1"},
                {"product_id": "V-002", "type_id": vest_type.id, "lot_number": "L1"},
            ],
        ),
    )
    second = await _inbound(
        ProductCategory.vest,
        _payload(staff_member.id, [{"product_id": "V-003", "type_id": vest_type.id}]),
    )

    assert first.document_number == "20240101-0001"
    assert first.product_ids == ["V-001", "V-002"]
    assert second.document_number == "20240101-0002"

    products = (await async_db_session.execute(select(Product).order_by(Product.product_id))).scalars().all()
    assert [p.product_id for p in products] == ["V-001", "V-002", "V-003"]
    assert all(p.status == ProductStatus.in_stock for p in products)
    assert [p.inbound_number for p in products] == ["20240101-0001", "20240101-0001", "20240101-0002"]

    records = (await async_db_session.execute(select(InboundRecord))).scalars().all()
    assert len(records) == 3
    assert {r.staff_id for r in records} == {staff_member.id}


@pytest.mark.asyncio
async def test_ledger_rows_keep_the_payload_date(async_db_session: AsyncSession, vest_type, staff_member):
    await _inbound(
        ProductCategory.vest,
        _payload(staff_member.id, [{"product_id": "V-010", "type_id": vest_type.id}], inbound_date=date(2023, 12, 30)),
    )

    record = (await async_db_session.execute(select(InboundRecord))).scalar_one()
    assert record.inbound_date == date(2023, 12, 30)
    assert record.inbound_number == "20240101-0001"


@pytest.mark.asyncio
async def test_duplicate_product_rolls_back_whole_batch(
    async_db_session: AsyncSession, vest_type, staff_member, make_products
):
    make_products(vest_type, ["V-002"], inbound_number="20231231-0001")

    with pytest.raises(DuplicateProductError) as excinfo:
        await _inbound(
            ProductCategory.vest,
            _payload(
                staff_member.id,
                [
                    {"product_id": "V-001", "type_id": vest_type.id},
                    {"product_id": "V-002", "type_id": vest_type.id},
                ],
            ),
        )

    assert excinfo.value.product_ids == ["V-002"]
    total = await async_db_session.scalar(select(func.count(Product.id)))
    assert total == 1
    assert await async_db_session.scalar(select(func.count(InboundRecord.id))) == 0

    # The rejected batch left no trace in the day's numbering.
    result = await _inbound(
        ProductCategory.vest,
        _payload(staff_member.id, [{"product_id": "V-003", "type_id": vest_type.id}]),
    )
    assert result.document_number == "20240101-0001"


@pytest.mark.asyncio
async def test_repeated_ids_within_batch_are_rejected(async_db_session: AsyncSession, vest_type, staff_member):
    with pytest.raises(DuplicateProductError):
        await _inbound(
            ProductCategory.vest,
            _payload(
                staff_member.id,
                [
                    {"product_id": "V-001", "type_id": vest_type.id},
                    {"product_id": "V-001", "type_id": vest_type.id},
                ],
            ),
        )

    assert await async_db_session.scalar(select(func.count(Product.id))) == 0


@pytest.mark.asyncio
async def test_type_from_other_category_is_not_found(
    async_db_session: AsyncSession, pc_type, staff_member
):
    with pytest.raises(ResourceNotFoundError):
        await _inbound(
            ProductCategory.vest,
            _payload(staff_member.id, [{"product_id": "V-001", "type_id": pc_type.id}]),
        )

    assert await async_db_session.scalar(select(func.count(Product.id))) == 0


@pytest.mark.asyncio
async def test_unknown_staff_is_not_found(async_db_session: AsyncSession, vest_type):
    with pytest.raises(ResourceNotFoundError):
        await _inbound(
            ProductCategory.vest,
            _payload(999, [{"product_id": "V-001", "type_id": vest_type.id}]),
        )


@pytest.mark.asyncio
async def test_pc_details_are_stored_only_for_pcs(
    async_db_session: AsyncSession, pc_type, vest_type, staff_member
):
    details = {"model_number": "LT-1400", "serial_number": "SN-1", "purchase_date": "2023-11-02", "warranty_period": 3}
    await _inbound(
        ProductCategory.pc,
        _payload(staff_member.id, [{"product_id": "PC-001", "type_id": pc_type.id, "pc_details": details}]),
    )
    await _inbound(
        ProductCategory.vest,
        _payload(staff_member.id, [{"product_id": "V-001", "type_id": vest_type.id, "pc_details": details}]),
    )

    rows = (await async_db_session.execute(select(PcDetails))).scalars().all()
    assert [row.product_id for row in rows] == ["PC-001"]
    assert rows[0].model_number == "LT-1400"
    assert rows[0].purchase_date == date(2023, 11, 2)
    assert rows[0].warranty_period == 3


@pytest.mark.asyncio
async def test_number_taken_by_concurrent_request_is_retryable(
    async_db_session: AsyncSession, db_session, vest_type, staff_member
):
    # A concurrent request registered 0001 but its ledger rows are not visible yet.
    db_session.add(
        MovementDocument(movement_type=MovementType.inbound, document_number="20240101-0001", issued_on=DAY)
    )
    db_session.commit()

    with pytest.raises(StorageError) as excinfo:
        await _inbound(
            ProductCategory.vest,
            _payload(staff_member.id, [{"product_id": "V-001", "type_id": vest_type.id}]),
        )

    assert excinfo.value.retryable is True
    assert await async_db_session.scalar(select(func.count(Product.id))) == 0
    assert await async_db_session.scalar(select(func.count(InboundRecord.id))) == 0


@pytest.mark.asyncio
async def test_concurrent_inbounds_never_share_a_number(async_db_session: AsyncSession, vest_type, staff_member):
    payloads = [
        _payload(staff_member.id, [{"product_id": f"V-{n:03d}", "type_id": vest_type.id}]) for n in range(8)
    ]

    outcomes = await asyncio.gather(
        *(_inbound(ProductCategory.vest, payload) for payload in payloads), return_exceptions=True
    )

    committed = [o for o in outcomes if not isinstance(o, BaseException)]
    failed = [o for o in outcomes if isinstance(o, BaseException)]
    numbers = [result.document_number for result in committed]

    assert committed
    assert len(numbers) == len(set(numbers))
    assert all(number.startswith("20240101-") for number in numbers)
    for exc in failed:
        assert isinstance(exc, StorageError), repr(exc)
        assert exc.retryable is True

    ledger_numbers = (await async_db_session.execute(select(InboundRecord.inbound_number))).scalars().all()
    assert sorted(ledger_numbers) == sorted(numbers)
