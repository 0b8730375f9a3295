# routers/leases.py
"""
Lease API routes.

A lease ties a tenant to a unit. Its status is stored as given.
"""
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from models import Lease, Tenant, Unit
from schemas.lease import LeaseCreate, LeaseUpdate, LeaseResponse
from .common import apply_update, commit_or_409, get_or_404

router = APIRouter(prefix="/api/leases", tags=["leases"])


@router.get(
     "",
     response_model=List[LeaseResponse],
     summary="List leases with filters"
)
def list_leases(
     tenant_id: Optional[int] = Query(None, description="Filter by tenant ID"),
     unit_id: Optional[int] = Query(None, description="Filter by unit ID"),
     db: Session = Depends(get_session)
):
     query = db.query(Lease)

     if tenant_id:
          query = query.filter(Lease.tenant_id == tenant_id)

     if unit_id:
          query = query.filter(Lease.unit_id == unit_id)

     return query.order_by(Lease.lease_start_date.desc()).all()


@router.get(
     "/{lease_id}",
     response_model=LeaseResponse,
     summary="Get lease by ID"
)
def get_lease(lease_id: int, db: Session = Depends(get_session)):
     return get_or_404(db, Lease, lease_id, "Lease")


@router.post(
     "",
     response_model=LeaseResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new lease"
)
def create_lease(lease_data: LeaseCreate, db: Session = Depends(get_session)):
     """
     Create a lease for an existing tenant and unit.

     - **tenant_id**: must reference a tenant (404 otherwise)
     - **unit_id**: must reference a unit (404 otherwise)
     """
     get_or_404(db, Tenant, lease_data.tenant_id, "Tenant")
     get_or_404(db, Unit, lease_data.unit_id, "Unit")

     lease = Lease(**lease_data.model_dump())
     db.add(lease)
     commit_or_409(db)
     db.refresh(lease)
     return lease


@router.put(
     "/{lease_id}",
     response_model=LeaseResponse,
     summary="Update lease"
)
def update_lease(
     lease_id: int,
     lease_data: LeaseUpdate,
     db: Session = Depends(get_session)
):
     lease = get_or_404(db, Lease, lease_id, "Lease")
     apply_update(lease, lease_data)
     commit_or_409(db)
     db.refresh(lease)
     return lease


@router.delete(
     "/{lease_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete lease"
)
def delete_lease(lease_id: int, db: Session = Depends(get_session)):
     lease = get_or_404(db, Lease, lease_id, "Lease")
     db.delete(lease)
     commit_or_409(db)
