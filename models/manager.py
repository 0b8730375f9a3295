# models/manager.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


class Manager(Base):
     """
     Manager model - staff responsible for one or more properties.
     Seeded with three managers by revision 12.
     """

     manager_id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String, nullable=False)
     email = Column(String, nullable=True)
     phone = Column(String, nullable=False)
     hire_date = Column(String, nullable=False)  # stored as YYYY-MM-DD text

     # Relationships
     properties = relationship("Property", back_populates="manager")

     def __repr__(self):
          return f"<Manager(manager_id={self.manager_id}, name='{self.name}')>"
