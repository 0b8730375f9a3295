# models/unit.py
from sqlalchemy import Column, Integer, String, Float, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class Unit(Base):
     """
     Unit model - an individual rentable unit within a property.
     Maps to the 'units' table as reshaped by revision 16, which turned
     the room counts into nullable REAL columns.
     """
     __tablename__ = "units"

     unit_id = Column(Integer, primary_key=True, autoincrement=True)
     unit_number = Column(String, nullable=False)
     property_id = Column(Integer, ForeignKey("properties.property_id"), nullable=False)
     block_id = Column(String, nullable=True)
     floor_number = Column(Integer, nullable=True)
     unit_status = Column(String, nullable=False)  # e.g. vacant, occupied
     unit_type = Column(String, nullable=False)

     # Pricing
     monthly_rent = Column(Numeric(10, 2, asdecimal=False), nullable=True)
     security_deposit = Column(Numeric(10, 2, asdecimal=False), nullable=True)

     tenant_id = Column(Integer, ForeignKey("tenants.tenant_id"), nullable=True)
     notes = Column(Text, nullable=True)
     bedroom_count = Column(Float, nullable=True)
     bathroom_count = Column(Float, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="units")
     tenant = relationship("Tenant", foreign_keys=[tenant_id])
     leases = relationship("Lease", back_populates="unit")

     def __repr__(self):
          return f"<Unit(unit_id={self.unit_id}, unit_number='{self.unit_number}', unit_status='{self.unit_status}')>"
