# schemas/property.py
"""
Pydantic schemas for the property endpoints.
"""
from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .block import BlockResponse
from .payment import PaymentResponse
from .tenant import TenantResponse
from .unit import UnitResponse


class PropertyCreate(BaseModel):
     """Schema for creating a property."""
     name: str = Field(..., min_length=1)
     address: str = Field(..., min_length=1)
     total_units: int = Field(..., ge=0)
     property_type: str = Field(..., min_length=1, description="e.g. Single, 1bedroom, 2bedroom")
     status: str = Field(default="active", description="active or maintenance")
     last_inspection: Optional[date] = None
     manager_id: int = Field(..., gt=0, description="Manager ID (must exist)")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Sunset Lofts",
                    "address": "123 Sunset Blvd",
                    "total_units": 24,
                    "property_type": "2bedroom",
                    "status": "active",
                    "last_inspection": "2024-05-12",
                    "manager_id": 1,
               }
          }
     )


class PropertyUpdate(BaseModel):
     """Schema for updating a property; only provided fields change."""
     name: Optional[str] = Field(None, min_length=1)
     address: Optional[str] = Field(None, min_length=1)
     total_units: Optional[int] = Field(None, ge=0)
     property_type: Optional[str] = Field(None, min_length=1)
     status: Optional[str] = None
     last_inspection: Optional[date] = None
     manager_id: Optional[int] = Field(None, gt=0)


     @field_validator("name", "address", "total_units", "property_type", "status", "manager_id")
     @classmethod
     def reject_null(cls, value):
          if value is None:
               raise ValueError("may not be null")
          return value


class PropertyResponse(BaseModel):
     property_id: int
     name: str
     address: str
     total_units: int
     property_type: str
     status: str
     last_inspection: Optional[date] = None
     manager_id: int
     manager_name: Optional[str] = None
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)


class PropertyPaymentResponse(PaymentResponse):
     tenant_name: Optional[str] = None
     unit_number: Optional[str] = None


class PropertyDetailsResponse(BaseModel):
     """A property together with everything the details screen lists."""
     property: PropertyResponse
     units: List[UnitResponse]
     blocks: List[BlockResponse]
     tenants: List[TenantResponse]
     payments: List[PropertyPaymentResponse]
