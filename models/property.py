# models/property.py
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, func, text
from sqlalchemy.orm import relationship
from .base import Base


class Property(Base):
     """
     Property model - a managed building or estate.
     Maps to the 'properties' table.
     """
     __tablename__ = "properties"

     property_id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String, nullable=False)
     address = Column(String, nullable=False)
     total_units = Column(Integer, nullable=False)
     property_type = Column(String, nullable=False)  # Single, 1bedroom ... 10bedroom
     status = Column(String, nullable=False, server_default=text("'active'"))  # active, maintenance
     last_inspection = Column(Date, nullable=True)
     manager_id = Column(Integer, ForeignKey("managers.manager_id"), nullable=False)

     # Timestamps
     created_at = Column(DateTime, server_default=text("CURRENT_TIMESTAMP"))
     updated_at = Column(DateTime, server_default=text("CURRENT_TIMESTAMP"), onupdate=func.now())

     # Relationships
     manager = relationship("Manager", back_populates="properties")
     units = relationship("Unit", back_populates="property")
     blocks = relationship("Block", back_populates="property")

     def __repr__(self):
          return f"<Property(property_id={self.property_id}, name='{self.name}')>"
