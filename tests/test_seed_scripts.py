# tests/test_seed_scripts.py
import pytest
from sqlalchemy import func, select

from inventory_tracker.domain.enums import ProductCategory
from inventory_tracker.models.product import PcModelNumber, ProductType
from inventory_tracker.models.staff import Staff
from scripts import seed_reference_data


@pytest.mark.asyncio
async def test_seed_reference_data_is_idempotent(async_db_session):
    created = await seed_reference_data.seed_reference_data()

    assert created == {
        "product_types": len(seed_reference_data.PRODUCT_TYPES),
        "staff": len(seed_reference_data.STAFF),
        "pc_model_numbers": len(seed_reference_data.PC_MODEL_NUMBERS),
    }
    pc_types = (
        await async_db_session.execute(
            select(ProductType.name).where(ProductType.category == ProductCategory.pc)
        )
    ).scalars().all()
    assert set(pc_types) == {"Laptop", "Desktop"}

    again = await seed_reference_data.seed_reference_data()
    assert again == {"product_types": 0, "staff": 0, "pc_model_numbers": 0}

    assert await async_db_session.scalar(select(func.count(Staff.id))) == len(seed_reference_data.STAFF)
    assert await async_db_session.scalar(select(func.count(PcModelNumber.id))) == len(
        seed_reference_data.PC_MODEL_NUMBERS
    )
