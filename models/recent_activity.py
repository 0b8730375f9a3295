# models/recent_activity.py
from sqlalchemy import Column, Integer, String
from .base import Base


class RecentActivity(Base):
     """RecentActivity model - one line of the dashboard activity feed."""

     recent_activity_id = Column(Integer, primary_key=True, autoincrement=True)
     activity_type = Column(String, nullable=False)  # payment, maintenance, lease, inspection
     message = Column(String, nullable=False)
     time = Column(String, nullable=False)  # display text, e.g. "2 hours ago"

     def __repr__(self):
          return f"<RecentActivity(recent_activity_id={self.recent_activity_id}, activity_type='{self.activity_type}')>"
