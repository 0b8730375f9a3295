# schemas/__init__.py
from .manager import ManagerCreate, ManagerUpdate, ManagerResponse
from .property import (
     PropertyCreate,
     PropertyUpdate,
     PropertyResponse,
     PropertyDetailsResponse,
)
from .block import BlockCreate, BlockUpdate, BlockResponse
from .unit import UnitCreate, UnitUpdate, UnitResponse
from .tenant import TenantCreate, TenantUpdate, TenantResponse
from .lease import LeaseCreate, LeaseUpdate, LeaseResponse
from .payment import PaymentCreate, PaymentUpdate, PaymentResponse
from .expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from .complaint import ComplaintCreate, ComplaintUpdate, ComplaintResponse
from .dashboard import TaskCreate, TaskResponse, RecentActivityCreate, RecentActivityResponse
from .user import UserCreate, UserResponse
from .commands import InvokeResponse

__all__ = [
     "ManagerCreate",
     "ManagerUpdate",
     "ManagerResponse",
     "PropertyCreate",
     "PropertyUpdate",
     "PropertyResponse",
     "PropertyDetailsResponse",
     "BlockCreate",
     "BlockUpdate",
     "BlockResponse",
     "UnitCreate",
     "UnitUpdate",
     "UnitResponse",
     "TenantCreate",
     "TenantUpdate",
     "TenantResponse",
     "LeaseCreate",
     "LeaseUpdate",
     "LeaseResponse",
     "PaymentCreate",
     "PaymentUpdate",
     "PaymentResponse",
     "ExpenseCreate",
     "ExpenseUpdate",
     "ExpenseResponse",
     "ComplaintCreate",
     "ComplaintUpdate",
     "ComplaintResponse",
     "TaskCreate",
     "TaskResponse",
     "RecentActivityCreate",
     "RecentActivityResponse",
     "UserCreate",
     "UserResponse",
     "InvokeResponse",
]
