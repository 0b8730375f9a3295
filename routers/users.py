# routers/users.py
"""
User API routes. Users are plain name/email records.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from models import User
from schemas.user import UserCreate, UserResponse
from .common import commit_or_409, get_or_404

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get(
     "",
     response_model=List[UserResponse],
     summary="List users"
)
def list_users(db: Session = Depends(get_session)):
     return db.query(User).order_by(User.user_id).all()


@router.get(
     "/{user_id}",
     response_model=UserResponse,
     summary="Get user by ID"
)
def get_user(user_id: int, db: Session = Depends(get_session)):
     return get_or_404(db, User, user_id, "User")


@router.post(
     "",
     response_model=UserResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new user"
)
def create_user(user_data: UserCreate, db: Session = Depends(get_session)):
     """Emails are unique; a duplicate returns 409."""
     user = User(**user_data.model_dump())
     db.add(user)
     commit_or_409(db, f"A user with email {user_data.email} already exists")
     db.refresh(user)
     return user


@router.delete(
     "/{user_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete user"
)
def delete_user(user_id: int, db: Session = Depends(get_session)):
     user = get_or_404(db, User, user_id, "User")
     db.delete(user)
     commit_or_409(db)
