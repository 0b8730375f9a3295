# schemas/payment.py
"""
Pydantic schemas for the payment endpoints.

Status, method and category reuse the model enums, so a bad value is
rejected with 422 before SQLite's CHECK constraint ever sees it.
"""
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from models.payment import PaymentCategory, PaymentMethod, PaymentStatus

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class PaymentCreate(BaseModel):
     """Schema for recording a payment."""
     payment_id: Optional[str] = Field(None, min_length=1, description="Generated as a UUID when omitted")
     tenant_id: str = Field(..., min_length=1)
     unit_id: str = Field(..., min_length=1)
     property_id: str = Field(..., min_length=1)
     amount_paid: float = Field(..., gt=0)
     payment_date: date
     due_date: date
     payment_status: PaymentStatus = Field(default=PaymentStatus.PENDING.value)
     payment_method: PaymentMethod = Field(default=PaymentMethod.BANK_TRANSFER.value)
     payment_category: PaymentCategory = Field(default=PaymentCategory.RENT.value)
     receipt_number: Optional[str] = None
     transaction_reference: Optional[str] = None
     remarks: Optional[str] = None
     payment_month: Optional[str] = Field(
          None,
          pattern=MONTH_PATTERN,
          description="YYYY-MM; defaults to the due date's month",
     )

     model_config = ConfigDict(
          use_enum_values=True,
          json_schema_extra={
               "example": {
                    "tenant_id": "1",
                    "unit_id": "1",
                    "property_id": "1",
                    "amount_paid": 1800.00,
                    "payment_date": "2024-06-01",
                    "due_date": "2024-06-01",
                    "payment_status": "Paid",
                    "payment_method": "Mobile Money",
                    "payment_category": "Rent",
                    "receipt_number": "RCP-0001",
                    "transaction_reference": "QF12XYZ",
               }
          }
     )


class PaymentUpdate(BaseModel):
     """Schema for updating a payment; only provided fields change."""
     tenant_id: Optional[str] = Field(None, min_length=1)
     unit_id: Optional[str] = Field(None, min_length=1)
     property_id: Optional[str] = Field(None, min_length=1)
     amount_paid: Optional[float] = Field(None, gt=0)
     payment_date: Optional[date] = None
     due_date: Optional[date] = None
     payment_status: Optional[PaymentStatus] = None
     payment_method: Optional[PaymentMethod] = None
     payment_category: Optional[PaymentCategory] = None
     receipt_number: Optional[str] = None
     transaction_reference: Optional[str] = None
     remarks: Optional[str] = None
     payment_month: Optional[str] = Field(None, pattern=MONTH_PATTERN)

     model_config = ConfigDict(use_enum_values=True)

     @field_validator("tenant_id", "unit_id", "property_id", "amount_paid", "payment_date",
                      "due_date", "payment_status", "payment_method", "payment_category",
                      "payment_month")
     @classmethod
     def reject_null(cls, value):
          if value is None:
               raise ValueError("may not be null")
          return value


class PaymentResponse(BaseModel):
     payment_id: str
     tenant_id: str
     unit_id: str
     property_id: str
     amount_paid: float
     payment_date: date
     due_date: date
     payment_status: PaymentStatus
     payment_method: PaymentMethod
     payment_category: PaymentCategory
     receipt_number: Optional[str] = None
     transaction_reference: Optional[str] = None
     remarks: Optional[str] = None
     payment_month: str
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
