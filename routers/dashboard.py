# routers/dashboard.py
"""
Stored dashboard rows: upcoming tasks and the recent activity feed.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from models import RecentActivity, Task
from schemas.dashboard import TaskCreate, TaskResponse, RecentActivityCreate, RecentActivityResponse
from .common import commit_or_409, get_or_404

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get(
     "/tasks",
     response_model=List[TaskResponse],
     summary="List tasks"
)
def list_tasks(db: Session = Depends(get_session)):
     return db.query(Task).order_by(Task.task_id).all()


@router.post(
     "/tasks",
     response_model=TaskResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a task"
)
def create_task(task_data: TaskCreate, db: Session = Depends(get_session)):
     """Task names are unique; a duplicate returns 409."""
     task = Task(**task_data.model_dump())
     db.add(task)
     commit_or_409(db, f"Task '{task_data.task_name}' already exists")
     db.refresh(task)
     return task


@router.delete(
     "/tasks/{task_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete a task"
)
def delete_task(task_id: int, db: Session = Depends(get_session)):
     task = get_or_404(db, Task, task_id, "Task")
     db.delete(task)
     commit_or_409(db)


@router.get(
     "/recent-activities",
     response_model=List[RecentActivityResponse],
     summary="List recent activities, newest first"
)
def list_recent_activities(db: Session = Depends(get_session)):
     return db.query(RecentActivity).order_by(RecentActivity.recent_activity_id.desc()).all()


@router.post(
     "/recent-activities",
     response_model=RecentActivityResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record an activity"
)
def create_recent_activity(activity_data: RecentActivityCreate, db: Session = Depends(get_session)):
     activity = RecentActivity(**activity_data.model_dump())
     db.add(activity)
     commit_or_409(db)
     db.refresh(activity)
     return activity


@router.delete(
     "/recent-activities/{activity_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete an activity"
)
def delete_recent_activity(activity_id: int, db: Session = Depends(get_session)):
     activity = get_or_404(db, RecentActivity, activity_id, "Recent activity")
     db.delete(activity)
     commit_or_409(db)
