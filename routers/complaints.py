# routers/complaints.py
"""
Complaint API routes.

Listed complaints carry the unit number and, when a tenant raised it,
the tenant's name.
"""
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from models import Complaint, ComplaintStatus, Tenant, Unit
from schemas.complaint import ComplaintCreate, ComplaintUpdate, ComplaintResponse
from .common import apply_update, commit_or_409, get_or_404

router = APIRouter(prefix="/api/complaints", tags=["complaints"])


def _build_complaint_response(complaint: Complaint) -> ComplaintResponse:
     response = ComplaintResponse.model_validate(complaint)
     response.unit_number = complaint.unit.unit_number if complaint.unit else None
     response.tenant_name = complaint.tenant.full_name if complaint.tenant else None
     return response


def _ensure_references(db: Session, unit_id: Optional[int], tenant_id: Optional[int]) -> None:
     if unit_id is not None:
          get_or_404(db, Unit, unit_id, "Unit")
     if tenant_id is not None:
          get_or_404(db, Tenant, tenant_id, "Tenant")


@router.get(
     "",
     response_model=List[ComplaintResponse],
     summary="List complaints"
)
def list_complaints(
     status_filter: Optional[ComplaintStatus] = Query(None, alias="status", description="Filter by status"),
     db: Session = Depends(get_session)
):
     """
     Retrieve complaints, newest first, with unit_number and tenant_name.
     """
     query = (
          db.query(Complaint, Unit.unit_number, Tenant.full_name)
          .outerjoin(Unit, Complaint.unit_id == Unit.unit_id)
          .outerjoin(Tenant, Complaint.tenant_id == Tenant.tenant_id)
     )
     if status_filter:
          query = query.filter(Complaint.status == status_filter.value)

     rows = query.order_by(Complaint.created_at.desc(), Complaint.complaint_id.desc()).all()
     return [
          {**complaint.to_dict(), "unit_number": unit_number, "tenant_name": tenant_name}
          for complaint, unit_number, tenant_name in rows
     ]


@router.get(
     "/{complaint_id}",
     response_model=ComplaintResponse,
     summary="Get complaint by ID"
)
def get_complaint(complaint_id: int, db: Session = Depends(get_session)):
     return _build_complaint_response(get_or_404(db, Complaint, complaint_id, "Complaint"))


@router.post(
     "",
     response_model=ComplaintResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Raise a complaint"
)
def create_complaint(complaint_data: ComplaintCreate, db: Session = Depends(get_session)):
     """
     Raise a complaint against a unit.

     - **unit_id**: must reference a unit (404 otherwise)
     - **tenant_id**: optional; must reference a tenant when given
     - **status**: Open, In Progress or Resolved (defaults to Open)
     """
     _ensure_references(db, complaint_data.unit_id, complaint_data.tenant_id)

     complaint = Complaint(**complaint_data.model_dump())
     db.add(complaint)
     commit_or_409(db)
     db.refresh(complaint)
     return _build_complaint_response(complaint)


@router.put(
     "/{complaint_id}",
     response_model=ComplaintResponse,
     summary="Update complaint"
)
def update_complaint(
     complaint_id: int,
     complaint_data: ComplaintUpdate,
     db: Session = Depends(get_session)
):
     """Only provided fields will be updated; updated_at is stamped."""
     complaint = get_or_404(db, Complaint, complaint_id, "Complaint")
     _ensure_references(db, complaint_data.unit_id, complaint_data.tenant_id)

     apply_update(complaint, complaint_data)
     commit_or_409(db)
     db.refresh(complaint)
     return _build_complaint_response(complaint)


@router.delete(
     "/{complaint_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete complaint"
)
def delete_complaint(complaint_id: int, db: Session = Depends(get_session)):
     complaint = get_or_404(db, Complaint, complaint_id, "Complaint")
     db.delete(complaint)
     commit_or_409(db)
