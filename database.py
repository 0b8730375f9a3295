# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration for the local SQLite file
- Session factory for dependency injection
- Connection utilities

Usage:
     from database import get_session, engine

     # In FastAPI routes:
     @router.get("/items")
     def get_items(db: Session = Depends(get_session)):
          return db.query(Item).all()
"""
import logging
import os
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Database configuration from environment
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///propertydesk.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"


def create_db_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO) -> Engine:
     """
     Build an engine for a SQLite database file.

     Foreign keys are switched on for every new connection; SQLite leaves
     them off unless asked.
     """
     db_engine = create_engine(
          url,
          connect_args={"check_same_thread": False},  # FastAPI runs sync routes in a threadpool
          echo=echo,  # Log SQL if SQL_ECHO=true
     )

     @event.listens_for(db_engine, "connect")
     def _enable_foreign_keys(dbapi_connection, connection_record):
          cursor = dbapi_connection.cursor()
          cursor.execute("PRAGMA foreign_keys=ON")
          cursor.close()

     return db_engine


# Create SQLAlchemy engine
engine = create_db_engine()

# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     Usage:
          @router.get("/items")
          def get_items(db: Session = Depends(get_session)):
               return db.query(Item).all()

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
     """
     Context manager for database sessions (for use outside FastAPI routes).

     Usage:
          with get_session_context() as db:
               managers = db.query(Manager).all()

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def check_connection(bind: Engine = None) -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     bind = bind or engine
     try:
          with bind.connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except Exception as e:
          logger.error("Database connection failed: %s", e)
          return False
