"""Seed product types, staff and PC model numbers.

Product types have no HTTP create path, so a fresh database needs this script
before the first inbound movement. Re-running it is a no-op for rows that
already exist.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import sys
from pathlib import Path

# Ensure project root is on PYTHONPATH when running as a script.
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from sqlalchemy import select

from inventory_tracker.core.config import settings
from inventory_tracker.db.session_async import AsyncSessionLocal
from inventory_tracker.domain.enums import ProductCategory
from inventory_tracker.models.product import PcModelNumber, ProductType
from inventory_tracker.models.staff import Staff


@dataclass(frozen=True, slots=True)
class SeedType:
    category: ProductCategory
    name: str


PRODUCT_TYPES: tuple[SeedType, ...] = (
    SeedType(ProductCategory.vest, "Vest M"),
    SeedType(ProductCategory.vest, "Vest L"),
    SeedType(ProductCategory.vest, "Vest XL"),
    SeedType(ProductCategory.pc, "Laptop"),
    SeedType(ProductCategory.pc, "Desktop"),
)

STAFF: tuple[str, ...] = ("Warehouse Lead", "Receiving Clerk", "Shipping Clerk")

PC_MODEL_NUMBERS: tuple[str, ...] = ("LT-1400", "LT-1600", "DT-3000")


async def seed_reference_data() -> dict[str, int]:
    """Insert missing reference rows; returns the number created per table."""
    logger = logging.getLogger("seed_reference_data")
    logger.info("Seeding reference data into %s", settings.ASYNC_DATABASE_URL)
    created = {"product_types": 0, "staff": 0, "pc_model_numbers": 0}

    async with AsyncSessionLocal() as session:
        rows = (await session.execute(select(ProductType.category, ProductType.name))).all()
        existing_types = {(category, name) for category, name in rows}
        for seed in PRODUCT_TYPES:
            if (seed.category, seed.name) in existing_types:
                continue
            session.add(ProductType(category=seed.category, name=seed.name))
            created["product_types"] += 1

        existing_staff = set((await session.execute(select(Staff.name))).scalars().all())
        for name in STAFF:
            if name not in existing_staff:
                session.add(Staff(name=name))
                created["staff"] += 1

        existing_models = set(
            (await session.execute(select(PcModelNumber.model_number))).scalars().all()
        )
        for model_number in PC_MODEL_NUMBERS:
            if model_number not in existing_models:
                session.add(PcModelNumber(model_number=model_number))
                created["pc_model_numbers"] += 1

        await session.commit()

    logger.info(
        "Seed completed: %s product types, %s staff, %s model numbers created",
        created["product_types"],
        created["staff"],
        created["pc_model_numbers"],
    )
    return created


async def main() -> None:
    await seed_reference_data()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
