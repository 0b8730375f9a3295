# models/__init__.py
from .base import Base
from .user import User
from .manager import Manager
from .property import Property
from .block import Block
from .unit import Unit
from .tenant import Tenant
from .lease import Lease
from .payment import Payment, PaymentStatus, PaymentMethod, PaymentCategory
from .expense import Expense
from .complaint import Complaint, ComplaintStatus
from .task import Task
from .recent_activity import RecentActivity

__all__ = [
     "Base",
     "User",
     "Manager",
     "Property",
     "Block",
     "Unit",
     "Tenant",
     "Lease",
     "Payment",
     "PaymentStatus",
     "PaymentMethod",
     "PaymentCategory",
     "Expense",
     "Complaint",
     "ComplaintStatus",
     "Task",
     "RecentActivity",
]
