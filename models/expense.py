# models/expense.py
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, Text, ForeignKey, text
from .base import Base


class Expense(Base):
     """
     Expense model - money spent on a unit, a block or a whole property.
     All three scope columns are optional.
     """
     __tablename__ = "expenses"

     expense_id = Column(Integer, primary_key=True, autoincrement=True)
     amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
     category = Column(String, nullable=False)  # e.g. maintenance, utility
     description = Column(Text, nullable=True)
     expense_date = Column(Date, nullable=False)

     unit_id = Column(Integer, ForeignKey("units.unit_id"), nullable=True)
     block_id = Column(Integer, ForeignKey("blocks.block_id"), nullable=True)
     property_id = Column(Integer, ForeignKey("properties.property_id"), nullable=True)

     payment_method = Column(String, nullable=False)  # e.g. cash, bank, M-Pesa
     vendor = Column(String, nullable=False)
     invoice_number = Column(String, nullable=True)
     paid_by = Column(String, nullable=True)  # who entered or approved the expense

     created_at = Column(DateTime, server_default=text("CURRENT_TIMESTAMP"))

     def __repr__(self):
          return f"<Expense(expense_id={self.expense_id}, amount={self.amount}, category='{self.category}')>"
