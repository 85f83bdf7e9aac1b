# inventory_tracker/schemas/staff.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class StaffCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class StaffRead(BaseModel):
    id: int
    name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
