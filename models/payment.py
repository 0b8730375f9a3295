# models/payment.py
import enum
import uuid
from sqlalchemy import Column, String, Numeric, Date, DateTime, Text, CheckConstraint, Index, func, text
from .base import Base


class PaymentStatus(str, enum.Enum):
     """Values allowed by the payment_status CHECK constraint."""
     PAID = "Paid"
     PENDING = "Pending"
     OVERDUE = "Overdue"


class PaymentMethod(str, enum.Enum):
     """Values allowed by the payment_method CHECK constraint."""
     CASH = "Cash"
     BANK_TRANSFER = "Bank Transfer"
     CREDIT_CARD = "Credit Card"
     MOBILE_MONEY = "Mobile Money"
     CHECK = "Check"
     OTHER = "Other"


class PaymentCategory(str, enum.Enum):
     """Values allowed by the payment_category CHECK constraint."""
     RENT = "Rent"
     UTILITIES = "Utilities"
     DEPOSIT = "Deposit"
     OTHER = "Other"


def _values(enum_cls) -> str:
     return ", ".join(f"'{member.value}'" for member in enum_cls)


class Payment(Base):
     """
     Payment model - money received against a tenant and unit.

     tenant_id, unit_id and property_id are TEXT and carry no foreign keys;
     SQLite's type affinity still lets them join against integer ids.
     payment_month (YYYY-MM) was added by revision 13 and is indexed.
     """
     __tablename__ = "payments"
     __table_args__ = (
          CheckConstraint(f"payment_status IN ({_values(PaymentStatus)})"),
          CheckConstraint(f"payment_method IN ({_values(PaymentMethod)})"),
          CheckConstraint(f"payment_category IN ({_values(PaymentCategory)})"),
          Index("idx_payment_month", "payment_month"),
          Index("idx_tenant_id", "tenant_id"),
          Index("idx_unit_id", "unit_id"),
     )

     payment_id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
     tenant_id = Column(String, nullable=False)
     unit_id = Column(String, nullable=False)
     property_id = Column(String, nullable=False)

     amount_paid = Column(Numeric(10, 2, asdecimal=False), nullable=False)
     payment_date = Column(Date, nullable=False)
     due_date = Column(Date, nullable=False)
     payment_status = Column(String, nullable=False)
     payment_method = Column(String, nullable=False)
     payment_category = Column(String, nullable=False)

     # Optional references
     receipt_number = Column(String, unique=True, nullable=True)
     transaction_reference = Column(String, nullable=True)  # e.g. M-Pesa code
     remarks = Column(Text, nullable=True)

     # Timestamps
     created_at = Column(DateTime, server_default=text("CURRENT_TIMESTAMP"))
     updated_at = Column(DateTime, server_default=text("CURRENT_TIMESTAMP"), onupdate=func.now())

     payment_month = Column(String, nullable=False, server_default=text("''"))

     def __repr__(self):
          return f"<Payment(payment_id='{self.payment_id}', amount_paid={self.amount_paid}, payment_status='{self.payment_status}')>"
