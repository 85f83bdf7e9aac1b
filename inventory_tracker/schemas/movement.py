# inventory_tracker/schemas/movement.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class PcDetailsCreate(BaseModel):
    model_number: str = Field(..., min_length=1, max_length=100)
    serial_number: str = Field(..., min_length=1, max_length=100)
    purchase_date: date
    warranty_period: Optional[int] = Field(None, ge=0)


class InboundItem(BaseModel):
    product_id: str = Field(..., min_length=1, max_length=100)
    type_id: int = Field(..., gt=0)
    lot_number: Optional[str] = Field(None, max_length=100)
    pc_details: Optional[PcDetailsCreate] = None

    @field_validator("product_id")
    @classmethod
    def strip_product_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("product_id must not be blank")
        return value


class InboundCreate(BaseModel):
    staff_id: int = Field(..., gt=0)
    inbound_date: date
    products: List[InboundItem] = Field(..., min_length=1)


class InboundResult(BaseModel):
    success: bool = True
    document_number: str
    product_ids: List[str]


class OutboundMetadata(BaseModel):
    customer_number: Optional[str] = Field(None, max_length=100)
    customer_name: Optional[str] = Field(None, max_length=200)
    purchaser_number: Optional[str] = Field(None, max_length=100)
    purchaser_name: Optional[str] = Field(None, max_length=200)
    notes: Optional[str] = None


class OutboundCreate(OutboundMetadata):
    product_id_start: str = Field(..., min_length=1, max_length=100)
    product_id_end: str = Field(..., min_length=1, max_length=100)
    staff_id: int = Field(..., gt=0)
    outbound_date: date

    @field_validator("product_id_start", "product_id_end")
    @classmethod
    def strip_boundary(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("product id boundary must not be blank")
        return value

    def metadata(self) -> OutboundMetadata:
        return OutboundMetadata(
            customer_number=self.customer_number,
            customer_name=self.customer_name,
            purchaser_number=self.purchaser_number,
            purchaser_name=self.purchaser_name,
            notes=self.notes,
        )


class OutboundResult(BaseModel):
    success: bool = True
    document_number: str
    processed_count: int
    products: List[str]
