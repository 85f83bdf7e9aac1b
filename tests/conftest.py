# tests/conftest.py
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import os
from collections.abc import Iterable
from datetime import date
from typing import Generator

import pytest
import pytest_asyncio
import httpx
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("ASYNC_DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("METRICS_ENABLED", "false")

from inventory_tracker.main import app
from inventory_tracker.db.session import Base
from inventory_tracker.db.session_async import AsyncSessionLocal
from inventory_tracker.domain.enums import ProductCategory, ProductStatus
from inventory_tracker.models.movement import InboundRecord
from inventory_tracker.models.product import PcDetails, Product, ProductType
from inventory_tracker.models.staff import Staff

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

sync_engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=sync_engine)


# ---------- Fixtures ----------
@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create the schema once per test session."""
    import inventory_tracker.models.movement  # noqa: F401
    import inventory_tracker.models.product  # noqa: F401
    import inventory_tracker.models.staff  # noqa: F401

    Base.metadata.create_all(bind=sync_engine)
    yield
    Base.metadata.drop_all(bind=sync_engine)


@pytest.fixture(autouse=True)
def clean_tables():
    yield
    with sync_engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Short-lived sync session used to seed rows before a test."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest_asyncio.fixture(scope="function")
async def client():
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def async_db_session() -> AsyncSession:
    """Fresh AsyncSession; movement transactions need one with no open transaction."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.rollback()


# --- Reference data ---

def _add(db: Session, obj):
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@pytest.fixture(scope="function")
def staff_member(db_session: Session) -> Staff:
    return _add(db_session, Staff(name="Receiving Clerk"))


@pytest.fixture(scope="function")
def vest_type(db_session: Session) -> ProductType:
    return _add(db_session, ProductType(category=ProductCategory.vest, name="Vest M"))


@pytest.fixture(scope="function")
def vest_type_large(db_session: Session) -> ProductType:
    return _add(db_session, ProductType(category=ProductCategory.vest, name="Vest L"))


@pytest.fixture(scope="function")
def pc_type(db_session: Session) -> ProductType:
    return _add(db_session, ProductType(category=ProductCategory.pc, name="Laptop"))


@pytest.fixture(scope="function")
def pc_type_desktop(db_session: Session) -> ProductType:
    return _add(db_session, ProductType(category=ProductCategory.pc, name="Desktop"))


@pytest.fixture(scope="function")
def make_products(db_session: Session):
    """Insert products directly, bypassing the inbound flow."""

    def _make(
        product_type: ProductType,
        product_ids: Iterable[str],
        *,
        status: ProductStatus = ProductStatus.in_stock,
        inbound_number: str = "20240101-0001",
        staff_id: int | None = None,
        lot_number: str | None = None,
        pc_model_number: str | None = None,
    ) -> list[str]:
        created = []
        for product_id in product_ids:
            db_session.add(
                Product(
                    product_id=product_id,
                    type_id=product_type.id,
                    lot_number=lot_number,
                    inbound_number=inbound_number,
                    status=status,
                )
            )
            if pc_model_number is not None:
                db_session.add(
                    PcDetails(
                        product_id=product_id,
                        model_number=pc_model_number,
                        serial_number=f"SN-{product_id}",
                        purchase_date=date(2024, 1, 1),
                    )
                )
            if staff_id is not None:
                db_session.add(
                    InboundRecord(
                        product_id=product_id,
                        staff_id=staff_id,
                        inbound_number=inbound_number,
                        inbound_date=date(2024, 1, 1),
                    )
                )
            created.append(product_id)
        db_session.commit()
        return created

    return _make
