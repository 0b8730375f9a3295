# routers/managers.py
"""
Manager API routes.

Three managers are seeded by migration 12; more can be added here.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from models import Manager
from schemas.manager import ManagerCreate, ManagerUpdate, ManagerResponse
from .common import apply_update, commit_or_409, get_or_404

router = APIRouter(prefix="/api/managers", tags=["managers"])


@router.get(
     "",
     response_model=List[ManagerResponse],
     summary="List all managers"
)
def list_managers(db: Session = Depends(get_session)):
     return db.query(Manager).order_by(Manager.name).all()


@router.get(
     "/{manager_id}",
     response_model=ManagerResponse,
     summary="Get manager by ID"
)
def get_manager(manager_id: int, db: Session = Depends(get_session)):
     return get_or_404(db, Manager, manager_id, "Manager")


@router.post(
     "",
     response_model=ManagerResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new manager"
)
def create_manager(manager_data: ManagerCreate, db: Session = Depends(get_session)):
     manager = Manager(**manager_data.model_dump())
     db.add(manager)
     commit_or_409(db)
     db.refresh(manager)
     return manager


@router.put(
     "/{manager_id}",
     response_model=ManagerResponse,
     summary="Update manager"
)
def update_manager(
     manager_id: int,
     manager_data: ManagerUpdate,
     db: Session = Depends(get_session)
):
     """Only provided fields will be updated."""
     manager = get_or_404(db, Manager, manager_id, "Manager")
     apply_update(manager, manager_data)
     commit_or_409(db)
     db.refresh(manager)
     return manager


@router.delete(
     "/{manager_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete manager"
)
def delete_manager(manager_id: int, db: Session = Depends(get_session)):
     """
     Delete a manager by ID.

     A manager still assigned to a property cannot be deleted (409).
     """
     manager = get_or_404(db, Manager, manager_id, "Manager")
     db.delete(manager)
     commit_or_409(db, f"Manager with ID {manager_id} is still assigned to a property")
