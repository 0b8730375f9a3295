# models/task.py
from sqlalchemy import Column, Integer, String
from .base import Base


class Task(Base):
     """Task model - a dashboard to-do item. task_name is unique."""

     task_id = Column(Integer, primary_key=True, autoincrement=True)
     task_name = Column(String, unique=True, nullable=False)
     due_date = Column(String, nullable=False)
     priority = Column(String, nullable=False)  # high, medium, low

     def __repr__(self):
          return f"<Task(task_id={self.task_id}, task_name='{self.task_name}')>"
