# routers/tenants.py
"""
Tenant API routes.
"""
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from models import Tenant
from schemas.tenant import TenantCreate, TenantUpdate, TenantResponse
from .common import apply_update, commit_or_409, get_or_404

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


@router.get(
     "",
     response_model=List[TenantResponse],
     summary="List tenants"
)
def list_tenants(
     status_filter: Optional[str] = Query(None, alias="status", description="Filter by status"),
     db: Session = Depends(get_session)
):
     query = db.query(Tenant)
     if status_filter:
          query = query.filter(Tenant.status == status_filter)
     return query.order_by(Tenant.full_name).all()


@router.get(
     "/{tenant_id}",
     response_model=TenantResponse,
     summary="Get tenant by ID"
)
def get_tenant(tenant_id: int, db: Session = Depends(get_session)):
     return get_or_404(db, Tenant, tenant_id, "Tenant")


@router.post(
     "",
     response_model=TenantResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new tenant"
)
def create_tenant(tenant_data: TenantCreate, db: Session = Depends(get_session)):
     tenant = Tenant(**tenant_data.model_dump())
     db.add(tenant)
     commit_or_409(db)
     db.refresh(tenant)
     return tenant


@router.put(
     "/{tenant_id}",
     response_model=TenantResponse,
     summary="Update tenant"
)
def update_tenant(
     tenant_id: int,
     tenant_data: TenantUpdate,
     db: Session = Depends(get_session)
):
     """Only provided fields will be updated; updated_at is stamped."""
     tenant = get_or_404(db, Tenant, tenant_id, "Tenant")
     apply_update(tenant, tenant_data)
     commit_or_409(db)
     db.refresh(tenant)
     return tenant


@router.delete(
     "/{tenant_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete tenant"
)
def delete_tenant(tenant_id: int, db: Session = Depends(get_session)):
     tenant = get_or_404(db, Tenant, tenant_id, "Tenant")
     db.delete(tenant)
     commit_or_409(db, f"Tenant with ID {tenant_id} is still referenced by a lease, unit or complaint")
