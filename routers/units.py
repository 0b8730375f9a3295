# routers/units.py
"""
Unit API routes.

Units belong to a property; block_id is free text (e.g. "A") rather than
a reference to the blocks table.
"""
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from models import Property, Unit
from schemas.unit import UnitCreate, UnitUpdate, UnitResponse
from .common import apply_update, commit_or_409, get_or_404

router = APIRouter(prefix="/api/units", tags=["units"])


@router.get(
     "",
     response_model=List[UnitResponse],
     summary="List units with filters"
)
def list_units(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     unit_status: Optional[str] = Query(None, description="Filter by unit status"),
     db: Session = Depends(get_session)
):
     query = db.query(Unit)

     if property_id:
          query = query.filter(Unit.property_id == property_id)

     if unit_status:
          query = query.filter(Unit.unit_status == unit_status)

     return query.order_by(Unit.property_id, Unit.unit_number).all()


@router.get(
     "/{unit_id}",
     response_model=UnitResponse,
     summary="Get unit by ID"
)
def get_unit(unit_id: int, db: Session = Depends(get_session)):
     return get_or_404(db, Unit, unit_id, "Unit")


@router.post(
     "",
     response_model=UnitResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new unit"
)
def create_unit(unit_data: UnitCreate, db: Session = Depends(get_session)):
     """
     Create a unit in an existing property.

     - **property_id**: must reference a property (404 otherwise)
     - **tenant_id**: optional; an unknown tenant is rejected with 409
     """
     get_or_404(db, Property, unit_data.property_id, "Property")

     unit = Unit(**unit_data.model_dump())
     db.add(unit)
     commit_or_409(db)
     db.refresh(unit)
     return unit


@router.put(
     "/{unit_id}",
     response_model=UnitResponse,
     summary="Update unit"
)
def update_unit(
     unit_id: int,
     unit_data: UnitUpdate,
     db: Session = Depends(get_session)
):
     unit = get_or_404(db, Unit, unit_id, "Unit")
     if unit_data.property_id is not None:
          get_or_404(db, Property, unit_data.property_id, "Property")

     apply_update(unit, unit_data)
     commit_or_409(db)
     db.refresh(unit)
     return unit


@router.delete(
     "/{unit_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete unit"
)
def delete_unit(unit_id: int, db: Session = Depends(get_session)):
     unit = get_or_404(db, Unit, unit_id, "Unit")
     db.delete(unit)
     commit_or_409(db, f"Unit with ID {unit_id} still has leases, complaints or expenses")
