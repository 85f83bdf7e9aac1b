# inventory_tracker/schemas/history.py
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel

from inventory_tracker.domain.enums import ProductCategory
from inventory_tracker.schemas.product import PcDetailsRead, StaffRef


class TypeRef(BaseModel):
    id: int
    name: str


class InboundHistoryRead(BaseModel):
    id: int
    inbound_number: str
    inbound_date: date
    product_id: str
    lot_number: Optional[str] = None
    type: TypeRef
    staff: StaffRef
    pc_details: Optional[PcDetailsRead] = None


class OutboundHistoryRead(BaseModel):
    id: int
    outbound_number: str
    outbound_date: date
    product_id: str
    lot_number: Optional[str] = None
    type: TypeRef
    staff: StaffRef
    customer_number: Optional[str] = None
    customer_name: Optional[str] = None
    purchaser_number: Optional[str] = None
    purchaser_name: Optional[str] = None
    notes: Optional[str] = None
    pc_details: Optional[PcDetailsRead] = None


class RecentActivity(BaseModel):
    type: Literal["inbound", "outbound"]
    movement_date: date
    recorded_at: datetime
    product_id: str
    category: ProductCategory
    staff_name: Optional[str] = None


class DashboardStats(BaseModel):
    total_products: int
    by_category: Dict[str, int]
    recent_activities: List[RecentActivity]
