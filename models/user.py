# models/user.py
from sqlalchemy import Column, Integer, String
from .base import Base


class User(Base):
     """
     User model - people who sign in to the desktop app.
     Maps to the 'users' table created by the first revision.
     """
     __tablename__ = "users"

     user_id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String, nullable=False)
     email = Column(String, unique=True, nullable=False)

     def __repr__(self):
          return f"<User(user_id={self.user_id}, email='{self.email}')>"
