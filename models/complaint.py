# models/complaint.py
import enum
from sqlalchemy import Column, Integer, String, Text, ForeignKey, CheckConstraint, func, text
from sqlalchemy.orm import relationship
from .base import Base


class ComplaintStatus(str, enum.Enum):
     """Values allowed by the complaints status CHECK constraint."""
     OPEN = "Open"
     IN_PROGRESS = "In Progress"
     RESOLVED = "Resolved"


class Complaint(Base):
     """
     Complaint model - an issue raised against a unit, optionally by a tenant.
     Timestamps are TEXT columns filled by SQLite's datetime('now').
     """
     __tablename__ = "complaints"
     __table_args__ = (
          CheckConstraint("status IN ('Open', 'In Progress', 'Resolved')"),
     )

     complaint_id = Column(Integer, primary_key=True, autoincrement=True)
     unit_id = Column(Integer, ForeignKey("units.unit_id"), nullable=False)
     tenant_id = Column(Integer, ForeignKey("tenants.tenant_id"), nullable=True)
     description = Column(Text, nullable=False)
     status = Column(String, nullable=False)

     created_at = Column(String, server_default=text("(datetime('now'))"))
     updated_at = Column(String, server_default=text("(datetime('now'))"), onupdate=func.datetime("now"))

     # Relationships
     unit = relationship("Unit")
     tenant = relationship("Tenant")

     def __repr__(self):
          return f"<Complaint(complaint_id={self.complaint_id}, status='{self.status}')>"
