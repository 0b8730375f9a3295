# schemas/lease.py
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class LeaseCreate(BaseModel):
     tenant_id: int = Field(..., gt=0, description="Tenant ID (must exist)")
     unit_id: int = Field(..., gt=0, description="Unit ID (must exist)")
     rent_amount: Optional[float] = Field(None, ge=0)
     lease_start_date: date
     lease_end_date: date
     deposit_paid: Optional[float] = Field(None, ge=0)
     status: str = Field(default="active", description="active, expired or terminated")


class LeaseUpdate(BaseModel):
     rent_amount: Optional[float] = Field(None, ge=0)
     lease_start_date: Optional[date] = None
     lease_end_date: Optional[date] = None
     deposit_paid: Optional[float] = Field(None, ge=0)
     status: Optional[str] = None

     @field_validator("lease_start_date", "lease_end_date")
     @classmethod
     def reject_null(cls, value):
          if value is None:
               raise ValueError("may not be null")
          return value


class LeaseResponse(BaseModel):
     lease_id: int
     tenant_id: int
     unit_id: int
     rent_amount: Optional[float] = None
     lease_start_date: date
     lease_end_date: date
     deposit_paid: Optional[float] = None
     status: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
