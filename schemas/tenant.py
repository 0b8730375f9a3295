# schemas/tenant.py
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class TenantCreate(BaseModel):
     """Schema for creating a tenant."""
     full_name: str = Field(..., min_length=1)
     phone_number: Optional[str] = None
     email: Optional[str] = None
     id_number: Optional[str] = None
     lease_start_date: date
     lease_end_date: date
     rent_amount: Optional[float] = Field(None, ge=0)
     deposit_amount: Optional[float] = Field(None, ge=0)
     unit_id: Optional[int] = Field(None, gt=0)
     status: str = Field(default="active")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "full_name": "John Doe",
                    "phone_number": "123-456-7890",
                    "email": "john@example.com",
                    "lease_start_date": "2024-03-01",
                    "lease_end_date": "2025-02-28",
                    "rent_amount": 1650.00,
                    "unit_id": 1,
               }
          }
     )


class TenantUpdate(BaseModel):
     full_name: Optional[str] = Field(None, min_length=1)
     phone_number: Optional[str] = None
     email: Optional[str] = None
     id_number: Optional[str] = None
     lease_start_date: Optional[date] = None
     lease_end_date: Optional[date] = None
     rent_amount: Optional[float] = Field(None, ge=0)
     deposit_amount: Optional[float] = Field(None, ge=0)
     unit_id: Optional[int] = Field(None, gt=0)
     status: Optional[str] = None

     @field_validator("full_name", "lease_start_date", "lease_end_date")
     @classmethod
     def reject_null(cls, value):
          if value is None:
               raise ValueError("may not be null")
          return value


class TenantResponse(BaseModel):
     tenant_id: int
     full_name: str
     phone_number: Optional[str] = None
     email: Optional[str] = None
     id_number: Optional[str] = None
     lease_start_date: date
     lease_end_date: date
     rent_amount: Optional[float] = None
     deposit_amount: Optional[float] = None
     unit_id: Optional[int] = None
     status: Optional[str] = None
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
