# inventory_tracker/schemas/product.py
from __future__ import annotations

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from inventory_tracker.domain.enums import ProductCategory, ProductStatus

Availability = Literal["unknown", "out_of_stock", "wrong_category", "available"]


class ProductTypeRead(BaseModel):
    id: int
    category: ProductCategory
    name: str

    model_config = ConfigDict(from_attributes=True)


class PcDetailsRead(BaseModel):
    model_number: str
    serial_number: str
    purchase_date: Optional[date] = None
    warranty_period: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class StaffRef(BaseModel):
    id: int
    name: Optional[str] = None


class InventoryItemRead(BaseModel):
    id: int
    product_id: str
    lot_number: Optional[str] = None
    inbound_number: str
    status: ProductStatus
    created_at: datetime
    updated_at: datetime
    type: ProductTypeRead
    staff: Optional[StaffRef] = None
    pc_details: Optional[PcDetailsRead] = None


class ExistingProduct(BaseModel):
    category: Optional[ProductCategory] = None
    type_name: Optional[str] = None
    status: Optional[ProductStatus] = None


class ProductCheckRead(BaseModel):
    exists: bool
    availability: Availability
    message: str
    existing_product: Optional[ExistingProduct] = None


class LatestLotNumberRead(BaseModel):
    lot_number: Optional[str] = None
    message: str


class PcModelNumberCreate(BaseModel):
    model_number: str = Field(..., min_length=1, max_length=100)


class PcModelNumberRead(BaseModel):
    id: int
    model_number: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
