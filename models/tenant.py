# models/tenant.py
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, func, text
from sqlalchemy.orm import relationship
from .base import Base


class Tenant(Base):
     """
     Tenant model - a person renting a unit.
     Maps to the 'tenants' table in the database.
     """
     __tablename__ = "tenants"

     tenant_id = Column(Integer, primary_key=True, autoincrement=True)

     # Personal info
     full_name = Column(String, nullable=False)
     phone_number = Column(String, nullable=True)
     email = Column(String, nullable=True)
     id_number = Column(String, nullable=True)

     # Tenancy
     lease_start_date = Column(Date, nullable=False)
     lease_end_date = Column(Date, nullable=False)
     rent_amount = Column(Numeric(10, 2, asdecimal=False), nullable=True)
     deposit_amount = Column(Numeric(10, 2, asdecimal=False), nullable=True)
     unit_id = Column(Integer, nullable=True)  # not a declared foreign key in the schema

     # Status
     status = Column(String, server_default=text("'active'"))

     # Timestamps
     created_at = Column(DateTime, server_default=text("CURRENT_TIMESTAMP"))
     updated_at = Column(DateTime, server_default=text("CURRENT_TIMESTAMP"), onupdate=func.now())

     # Relationships
     leases = relationship("Lease", back_populates="tenant")

     def __repr__(self):
          return f"<Tenant(tenant_id={self.tenant_id}, name='{self.full_name}')>"
