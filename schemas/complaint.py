# schemas/complaint.py
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from models.complaint import ComplaintStatus


class ComplaintCreate(BaseModel):
     unit_id: int = Field(..., gt=0, description="Unit ID (must exist)")
     tenant_id: Optional[int] = Field(None, gt=0, description="Tenant ID (must exist when given)")
     description: str = Field(..., min_length=1)
     status: ComplaintStatus = Field(default=ComplaintStatus.OPEN.value)

     model_config = ConfigDict(use_enum_values=True)


class ComplaintUpdate(BaseModel):
     unit_id: Optional[int] = Field(None, gt=0)
     tenant_id: Optional[int] = Field(None, gt=0)
     description: Optional[str] = Field(None, min_length=1)
     status: Optional[ComplaintStatus] = None

     model_config = ConfigDict(use_enum_values=True)

     @field_validator("unit_id", "description", "status")
     @classmethod
     def reject_null(cls, value):
          if value is None:
               raise ValueError("may not be null")
          return value


class ComplaintResponse(BaseModel):
     complaint_id: int
     unit_id: int
     tenant_id: Optional[int] = None
     description: str
     status: ComplaintStatus
     created_at: Optional[str] = None
     updated_at: Optional[str] = None
     unit_number: Optional[str] = None
     tenant_name: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
