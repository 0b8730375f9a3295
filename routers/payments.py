# routers/payments.py
"""
Payment API routes.

payment_id is a UUID string generated on create unless the client sends
one. payment_month (YYYY-MM) follows the due date unless it is given
explicitly, the same rule revision 13 used to backfill existing rows.
"""
import uuid
from datetime import date
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from models import Payment, PaymentStatus
from schemas.payment import MONTH_PATTERN, PaymentCreate, PaymentUpdate, PaymentResponse
from .common import changed_fields, commit_or_409, get_or_404

router = APIRouter(prefix="/api/payments", tags=["payments"])


def _payment_month(due_date: date) -> str:
     return due_date.strftime("%Y-%m")


@router.get(
     "",
     response_model=List[PaymentResponse],
     summary="List payments with filters"
)
def list_payments(
     payment_month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="Filter by month (YYYY-MM)"),
     tenant_id: Optional[str] = Query(None, description="Filter by tenant ID"),
     unit_id: Optional[str] = Query(None, description="Filter by unit ID"),
     property_id: Optional[str] = Query(None, description="Filter by property ID"),
     payment_status: Optional[PaymentStatus] = Query(None, description="Filter by status"),
     db: Session = Depends(get_session)
):
     """
     Retrieve payments, newest payment date first.

     Filters:
     - **payment_month**: payments whose month is YYYY-MM
     - **tenant_id** / **unit_id** / **property_id**: payments for that record
     - **payment_status**: Paid, Pending or Overdue
     """
     query = db.query(Payment)

     if payment_month:
          query = query.filter(Payment.payment_month == payment_month)

     if tenant_id:
          query = query.filter(Payment.tenant_id == tenant_id)

     if unit_id:
          query = query.filter(Payment.unit_id == unit_id)

     if property_id:
          query = query.filter(Payment.property_id == property_id)

     if payment_status:
          query = query.filter(Payment.payment_status == payment_status.value)

     return query.order_by(Payment.payment_date.desc(), Payment.created_at.desc()).all()


@router.get(
     "/{payment_id}",
     response_model=PaymentResponse,
     summary="Get payment by ID"
)
def get_payment(payment_id: str, db: Session = Depends(get_session)):
     return get_or_404(db, Payment, payment_id, "Payment")


@router.post(
     "",
     response_model=PaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a payment"
)
def create_payment(payment_data: PaymentCreate, db: Session = Depends(get_session)):
     """
     Record a payment.

     - **payment_id**: optional; a UUID is generated when omitted
     - **payment_month**: optional; defaults to the due date's YYYY-MM
     - **receipt_number**: must be unique when given (409 otherwise)
     """
     fields = payment_data.model_dump()
     fields["payment_id"] = fields["payment_id"] or str(uuid.uuid4())
     fields["payment_month"] = fields["payment_month"] or _payment_month(payment_data.due_date)

     payment = Payment(**fields)
     db.add(payment)
     commit_or_409(db)
     db.refresh(payment)
     return payment


@router.put(
     "/{payment_id}",
     response_model=PaymentResponse,
     summary="Update payment"
)
def update_payment(
     payment_id: str,
     payment_data: PaymentUpdate,
     db: Session = Depends(get_session)
):
     """
     Update an existing payment.

     Only provided fields will be updated. Moving the due date without
     sending payment_month moves the payment to the new due date's month.
     """
     payment = get_or_404(db, Payment, payment_id, "Payment")
     fields = changed_fields(payment_data)

     if fields.get("due_date") and not fields.get("payment_month"):
          fields["payment_month"] = _payment_month(fields["due_date"])

     for key, value in fields.items():
          setattr(payment, key, value)

     commit_or_409(db)
     db.refresh(payment)
     return payment


@router.delete(
     "/{payment_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete payment"
)
def delete_payment(payment_id: str, db: Session = Depends(get_session)):
     payment = get_or_404(db, Payment, payment_id, "Payment")
     db.delete(payment)
     commit_or_409(db)
