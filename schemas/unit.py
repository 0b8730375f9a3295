# schemas/unit.py
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class UnitCreate(BaseModel):
     """Schema for creating a unit."""
     unit_number: str = Field(..., min_length=1)
     property_id: int = Field(..., gt=0, description="Property ID (must exist)")
     block_id: Optional[str] = None
     floor_number: Optional[int] = None
     unit_status: str = Field(..., min_length=1, description="e.g. vacant, occupied")
     unit_type: str = Field(..., min_length=1, description="e.g. 2BR/2BA, Studio")
     bedroom_count: Optional[float] = Field(None, ge=0)
     bathroom_count: Optional[float] = Field(None, ge=0)
     monthly_rent: Optional[float] = Field(None, ge=0)
     security_deposit: Optional[float] = Field(None, ge=0)
     tenant_id: Optional[int] = Field(None, gt=0)
     notes: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "unit_number": "SL-201",
                    "property_id": 1,
                    "block_id": "A",
                    "floor_number": 2,
                    "unit_status": "occupied",
                    "unit_type": "2BR/2BA",
                    "bedroom_count": 2,
                    "bathroom_count": 2,
                    "monthly_rent": 1800.00,
                    "security_deposit": 1800.00,
               }
          }
     )


class UnitUpdate(BaseModel):
     unit_number: Optional[str] = Field(None, min_length=1)
     property_id: Optional[int] = Field(None, gt=0)
     block_id: Optional[str] = None
     floor_number: Optional[int] = None
     unit_status: Optional[str] = Field(None, min_length=1)
     unit_type: Optional[str] = Field(None, min_length=1)
     bedroom_count: Optional[float] = Field(None, ge=0)
     bathroom_count: Optional[float] = Field(None, ge=0)
     monthly_rent: Optional[float] = Field(None, ge=0)
     security_deposit: Optional[float] = Field(None, ge=0)
     tenant_id: Optional[int] = Field(None, gt=0)
     notes: Optional[str] = None

     @field_validator("unit_number", "property_id", "unit_status", "unit_type")
     @classmethod
     def reject_null(cls, value):
          if value is None:
               raise ValueError("may not be null")
          return value


class UnitResponse(BaseModel):
     unit_id: int
     unit_number: str
     property_id: int
     block_id: Optional[str] = None
     floor_number: Optional[int] = None
     unit_status: str
     unit_type: str
     bedroom_count: Optional[float] = None
     bathroom_count: Optional[float] = None
     monthly_rent: Optional[float] = None
     security_deposit: Optional[float] = None
     tenant_id: Optional[int] = None
     notes: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
