# routers/common.py
"""
Helpers shared by the record routers.
"""
import logging
from typing import Any, Dict, Type, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def get_or_404(db: Session, model: Type[ModelT], record_id: Any, label: str) -> ModelT:
     """Load a row by primary key or raise 404 "<label> with ID <id> not found"."""
     record = db.get(model, record_id)
     if record is None:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"{label} with ID {record_id} not found"
          )
     return record


def commit_or_409(db: Session, detail: str = None) -> None:
     """
     Commit the session, turning a UNIQUE, CHECK or FOREIGN KEY violation
     into a 409 after rolling back.
     """
     try:
          db.commit()
     except IntegrityError as e:
          db.rollback()
          logger.warning("Constraint violation: %s", e.orig)
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail=detail or f"Constraint violation: {e.orig}"
          ) from e


def changed_fields(data: BaseModel) -> Dict[str, Any]:
     """Fields the client actually sent; 400 when there are none."""
     fields = data.model_dump(exclude_unset=True)
     if not fields:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="No fields to update"
          )
     return fields


def apply_update(record: Base, data: BaseModel) -> Dict[str, Any]:
     fields = changed_fields(data)
     for key, value in fields.items():
          setattr(record, key, value)
     return fields
