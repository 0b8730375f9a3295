# routers/properties.py
"""
Property API routes.

Provides CRUD for properties plus the detail view the property page
opens: the property with its units, blocks, tenants and payments.
"""
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Session

from database import get_session
from models import Block, Manager, Payment, Property, Tenant, Unit
from schemas.property import (
     PropertyCreate,
     PropertyUpdate,
     PropertyResponse,
     PropertyDetailsResponse,
)
from .common import apply_update, commit_or_409, get_or_404

router = APIRouter(prefix="/api/properties", tags=["properties"])


def _build_property_response(prop: Property) -> PropertyResponse:
     """Build PropertyResponse with the manager's name."""
     response = PropertyResponse.model_validate(prop)
     response.manager_name = prop.manager.name if prop.manager else None
     return response


def _ensure_manager(db: Session, manager_id: int) -> None:
     get_or_404(db, Manager, manager_id, "Manager")


@router.get(
     "",
     response_model=List[PropertyResponse],
     summary="List properties with filters"
)
def list_properties(
     status_filter: Optional[str] = Query(None, alias="status", description="Filter by status"),
     property_type: Optional[str] = Query(None, description="Filter by property type"),
     search: Optional[str] = Query(None, description="Match name or address"),
     db: Session = Depends(get_session)
):
     """
     Retrieve properties, optionally filtered.

     - **status**: active or maintenance
     - **property_type**: e.g. 2bedroom
     - **search**: case-insensitive substring of name or address
     """
     query = db.query(Property)

     if status_filter:
          query = query.filter(Property.status == status_filter)

     if property_type:
          query = query.filter(Property.property_type == property_type)

     if search:
          pattern = f"%{search}%"
          query = query.filter(
               or_(Property.name.ilike(pattern), Property.address.ilike(pattern))
          )

     properties = query.order_by(Property.name).all()
     return [_build_property_response(prop) for prop in properties]


@router.get(
     "/types",
     response_model=List[str],
     summary="List stored property types"
)
def list_property_types(db: Session = Depends(get_session)):
     rows = db.query(Property.property_type).distinct().order_by(Property.property_type).all()
     return [row[0] for row in rows]


@router.get(
     "/{property_id}",
     response_model=PropertyResponse,
     summary="Get property by ID"
)
def get_property(property_id: int, db: Session = Depends(get_session)):
     prop = get_or_404(db, Property, property_id, "Property")
     return _build_property_response(prop)


@router.get(
     "/{property_id}/details",
     response_model=PropertyDetailsResponse,
     summary="Get a property with its units, blocks, tenants and payments"
)
def get_property_details(property_id: int, db: Session = Depends(get_session)):
     """
     Everything the property page shows in one call.

     Tenants are the ones whose unit belongs to this property. Payments
     carry the tenant's name and the unit number where those rows exist.
     """
     prop = get_or_404(db, Property, property_id, "Property")

     units = (
          db.query(Unit)
          .filter(Unit.property_id == property_id)
          .order_by(Unit.unit_number)
          .all()
     )
     blocks = (
          db.query(Block)
          .filter(Block.property_id == property_id)
          .order_by(Block.block_name)
          .all()
     )
     tenants = (
          db.query(Tenant)
          .join(Unit, Tenant.unit_id == Unit.unit_id)
          .filter(Unit.property_id == property_id)
          .order_by(Tenant.full_name)
          .all()
     )

     # payments keep TEXT ids, so compare against the integer keys as text
     payment_rows = (
          db.query(Payment, Tenant.full_name, Unit.unit_number)
          .outerjoin(Tenant, cast(Tenant.tenant_id, String) == Payment.tenant_id)
          .outerjoin(Unit, cast(Unit.unit_id, String) == Payment.unit_id)
          .filter(Payment.property_id == str(property_id))
          .order_by(Payment.payment_date.desc())
          .all()
     )
     payments = [
          {**payment.to_dict(), "tenant_name": tenant_name, "unit_number": unit_number}
          for payment, tenant_name, unit_number in payment_rows
     ]

     return {
          "property": _build_property_response(prop),
          "units": units,
          "blocks": [{**block.to_dict(), "property_name": prop.name} for block in blocks],
          "tenants": tenants,
          "payments": payments,
     }


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new property"
)
def create_property(property_data: PropertyCreate, db: Session = Depends(get_session)):
     """
     Create a property managed by an existing manager.

     - **manager_id**: must reference a manager (404 otherwise)
     - **status**: defaults to active
     """
     _ensure_manager(db, property_data.manager_id)

     prop = Property(**property_data.model_dump())
     db.add(prop)
     commit_or_409(db)
     db.refresh(prop)
     return _build_property_response(prop)


@router.put(
     "/{property_id}",
     response_model=PropertyResponse,
     summary="Update property"
)
def update_property(
     property_id: int,
     property_data: PropertyUpdate,
     db: Session = Depends(get_session)
):
     """Only provided fields will be updated; updated_at is stamped."""
     prop = get_or_404(db, Property, property_id, "Property")
     if property_data.manager_id is not None:
          _ensure_manager(db, property_data.manager_id)

     apply_update(prop, property_data)
     commit_or_409(db)
     db.refresh(prop)
     return _build_property_response(prop)


@router.delete(
     "/{property_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete property"
)
def delete_property(property_id: int, db: Session = Depends(get_session)):
     """
     Delete a property by ID.

     A property that still has units or blocks cannot be deleted (409).
     """
     prop = get_or_404(db, Property, property_id, "Property")
     db.delete(prop)
     commit_or_409(db, f"Property with ID {property_id} still has units or blocks")
