# schemas/expense.py
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class ExpenseCreate(BaseModel):
     amount: float = Field(..., gt=0)
     category: str = Field(..., min_length=1, description="e.g. Maintenance, Utilities")
     description: Optional[str] = None
     expense_date: date
     unit_id: Optional[int] = Field(None, gt=0)
     block_id: Optional[int] = Field(None, gt=0)
     property_id: Optional[int] = Field(None, gt=0)
     payment_method: str = Field(..., min_length=1)
     vendor: str = Field(..., min_length=1)
     invoice_number: Optional[str] = None
     paid_by: Optional[str] = None


class ExpenseUpdate(BaseModel):
     amount: Optional[float] = Field(None, gt=0)
     category: Optional[str] = Field(None, min_length=1)
     description: Optional[str] = None
     expense_date: Optional[date] = None
     unit_id: Optional[int] = Field(None, gt=0)
     block_id: Optional[int] = Field(None, gt=0)
     property_id: Optional[int] = Field(None, gt=0)
     payment_method: Optional[str] = Field(None, min_length=1)
     vendor: Optional[str] = Field(None, min_length=1)
     invoice_number: Optional[str] = None
     paid_by: Optional[str] = None

     @field_validator("amount", "category", "expense_date", "payment_method", "vendor")
     @classmethod
     def reject_null(cls, value):
          if value is None:
               raise ValueError("may not be null")
          return value


class ExpenseResponse(BaseModel):
     expense_id: int
     amount: float
     category: str
     description: Optional[str] = None
     expense_date: date
     unit_id: Optional[int] = None
     block_id: Optional[int] = None
     property_id: Optional[int] = None
     payment_method: str
     vendor: str
     invoice_number: Optional[str] = None
     paid_by: Optional[str] = None
     created_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
