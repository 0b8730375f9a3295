# routers/expenses.py
"""
Expense API routes.

An expense may be tied to a unit, a block and/or a property; each given
reference must exist.
"""
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from models import Expense
from schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from .common import apply_update, commit_or_409, get_or_404

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get(
     "",
     response_model=List[ExpenseResponse],
     summary="List expenses with filters"
)
def list_expenses(
     category: Optional[str] = Query(None, description="Filter by category"),
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     block_id: Optional[int] = Query(None, description="Filter by block ID"),
     db: Session = Depends(get_session)
):
     query = db.query(Expense)

     if category:
          query = query.filter(Expense.category == category)

     if property_id:
          query = query.filter(Expense.property_id == property_id)

     if block_id:
          query = query.filter(Expense.block_id == block_id)

     return query.order_by(Expense.expense_date.desc()).all()


@router.get(
     "/{expense_id}",
     response_model=ExpenseResponse,
     summary="Get expense by ID"
)
def get_expense(expense_id: int, db: Session = Depends(get_session)):
     return get_or_404(db, Expense, expense_id, "Expense")


@router.post(
     "",
     response_model=ExpenseResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record an expense"
)
def create_expense(expense_data: ExpenseCreate, db: Session = Depends(get_session)):
     """
     Record an expense.

     An unknown unit_id, block_id or property_id is rejected with 409.
     """
     expense = Expense(**expense_data.model_dump())
     db.add(expense)
     commit_or_409(db)
     db.refresh(expense)
     return expense


@router.put(
     "/{expense_id}",
     response_model=ExpenseResponse,
     summary="Update expense"
)
def update_expense(
     expense_id: int,
     expense_data: ExpenseUpdate,
     db: Session = Depends(get_session)
):
     expense = get_or_404(db, Expense, expense_id, "Expense")
     apply_update(expense, expense_data)
     commit_or_409(db)
     db.refresh(expense)
     return expense


@router.delete(
     "/{expense_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete expense"
)
def delete_expense(expense_id: int, db: Session = Depends(get_session)):
     expense = get_or_404(db, Expense, expense_id, "Expense")
     db.delete(expense)
     commit_or_409(db)
