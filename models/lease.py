# models/lease.py
from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey, text
from sqlalchemy.orm import relationship
from .base import Base


class Lease(Base):
     """
     Lease model - rental agreement between a tenant and a unit.
     Status is stored as given (active/expired/terminated); nothing here
     moves a lease between states.
     """
     __tablename__ = "leases"

     lease_id = Column(Integer, primary_key=True, autoincrement=True)
     tenant_id = Column(Integer, ForeignKey("tenants.tenant_id"), nullable=False)
     unit_id = Column(Integer, ForeignKey("units.unit_id"), nullable=False)

     # Pricing
     rent_amount = Column(Numeric(10, 2, asdecimal=False), nullable=True)
     deposit_paid = Column(Numeric(10, 2, asdecimal=False), nullable=True)

     # Lease period
     lease_start_date = Column(Date, nullable=False)
     lease_end_date = Column(Date, nullable=False)

     status = Column(String, server_default=text("'active'"))

     # Relationships
     tenant = relationship("Tenant", back_populates="leases")
     unit = relationship("Unit", back_populates="leases")

     def __repr__(self):
          return f"<Lease(lease_id={self.lease_id}, tenant_id={self.tenant_id}, unit_id={self.unit_id})>"
