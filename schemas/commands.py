# schemas/commands.py
"""
Pydantic schemas for the dashboard command payloads.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, Field


class StatCard(BaseModel):
     """One summary card on the dashboard header."""
     title: str
     value: str
     change: str
     icon: str = Field(..., description="Icon name understood by the front-end")
     color: str


class ActivityItem(BaseModel):
     type: str
     message: str
     time: str


class UpcomingTask(BaseModel):
     task: str
     due: str
     priority: str


class TenantInfo(BaseModel):
     id: str
     name: str
     lease_end_date: str


class MockUnit(BaseModel):
     id: str
     unit_number: str
     property: str
     block: str
     floor: int
     status: str
     type: str
     bedrooms: int
     bathrooms: int
     square_footage: int
     rent: int
     security_deposit: int
     amenities: List[str]
     photos: List[str]
     tenant_info: Optional[TenantInfo] = None
     notes: str


class MockTenant(BaseModel):
     id: int
     name: str
     email: str
     phone: str
     status: str
     unit: str
     property: str
     rent_amount: int
     lease_start: str
     lease_end: str


class MockProperty(BaseModel):
     id: int
     name: str
     address: str
     block: str
     total_units: int
     occupied_units: int
     vacant_units: int
     monthly_rent: int
     property_type: str
     status: str
     image: str
     last_inspection: str
     manager: str


class MockPayment(BaseModel):
     id: str
     tenant: str
     unit: str
     property: str
     amount: float
     date: str
     due_date: str
     status: str
     method: str
     category: str


class MockExpense(BaseModel):
     id: str
     amount: float
     category: str
     description: str
     date: str
     unit_id: str
     unit_name: str
     block_name: str
     payment_method: str
     vendor: str


class InvokeResponse(BaseModel):
     """Envelope for POST /api/invoke/{command}."""
     command: str
     result: Any
