# routers/system.py
"""
Health and migration status routes.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from database import check_connection, get_session
from services.migration_service import current_revision, list_migrations

router = APIRouter(prefix="/api", tags=["system"])


class HealthResponse(BaseModel):
     status: str
     database: bool
     revision: Optional[str] = None


class MigrationStatus(BaseModel):
     version: int
     revision: str
     description: str
     applied: bool


@router.get("/health", response_model=HealthResponse, summary="Service health")
def health(db: Session = Depends(get_session)):
     """ok when the database answers, degraded otherwise."""
     bind = db.get_bind()
     connected = check_connection(bind)
     return HealthResponse(
          status="ok" if connected else "degraded",
          database=connected,
          revision=current_revision(bind) if connected else None,
     )


@router.get("/migrations", response_model=List[MigrationStatus], summary="Known migrations")
def migrations(db: Session = Depends(get_session)):
     return list_migrations(db.get_bind())
