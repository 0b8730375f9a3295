# schemas/dashboard.py
"""
Schemas for the stored dashboard rows: tasks and the activity feed.
"""
from pydantic import BaseModel, Field, ConfigDict


class TaskCreate(BaseModel):
     task_name: str = Field(..., min_length=1)
     due_date: str = Field(..., min_length=1)
     priority: str = Field(..., min_length=1, description="high, medium or low")


class TaskResponse(BaseModel):
     task_id: int
     task_name: str
     due_date: str
     priority: str

     model_config = ConfigDict(from_attributes=True)


class RecentActivityCreate(BaseModel):
     activity_type: str = Field(..., min_length=1)
     message: str = Field(..., min_length=1)
     time: str = Field(..., min_length=1)


class RecentActivityResponse(BaseModel):
     recent_activity_id: int
     activity_type: str
     message: str
     time: str

     model_config = ConfigDict(from_attributes=True)
