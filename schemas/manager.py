# schemas/manager.py
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class ManagerCreate(BaseModel):
     """Schema for creating a manager."""
     name: str = Field(..., min_length=1)
     email: Optional[str] = None
     phone: str = Field(..., min_length=1)
     hire_date: str = Field(..., min_length=1, description="Hire date as YYYY-MM-DD")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Dana Brooks",
                    "email": "dana.b@example.com",
                    "phone": "222-333-4444",
                    "hire_date": "2025-02-01",
               }
          }
     )


class ManagerUpdate(BaseModel):
     name: Optional[str] = Field(None, min_length=1)
     email: Optional[str] = None
     phone: Optional[str] = Field(None, min_length=1)
     hire_date: Optional[str] = Field(None, min_length=1)

     @field_validator("name", "phone", "hire_date")
     @classmethod
     def reject_null(cls, value):
          if value is None:
               raise ValueError("may not be null")
          return value


class ManagerResponse(BaseModel):
     manager_id: int
     name: str
     email: Optional[str] = None
     phone: str
     hire_date: str

     model_config = ConfigDict(from_attributes=True)
