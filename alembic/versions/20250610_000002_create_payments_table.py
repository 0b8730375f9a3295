"""Create payments table

Revision ID: 20250610_000002
Revises: 20250610_000001
Create Date: 2025-06-10

Payments keep tenant, unit and property references as TEXT with no
foreign keys. Status, method and category are limited by CHECK
constraints.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000002'
down_revision: Union[str, None] = '20250610_000001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the payments table."""
    op.create_table(
        'payments',
        sa.Column('payment_id', sa.Text(), primary_key=True, nullable=False),  # UUID
        sa.Column('tenant_id', sa.Text(), nullable=False),
        sa.Column('unit_id', sa.Text(), nullable=False),
        sa.Column('property_id', sa.Text(), nullable=False),
        sa.Column('amount_paid', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('payment_status', sa.Text(), nullable=False),
        sa.Column('payment_method', sa.Text(), nullable=False),
        sa.Column('payment_category', sa.Text(), nullable=False),
        sa.Column('receipt_number', sa.Text(), unique=True),
        sa.Column('transaction_reference', sa.Text()),  # e.g. M-Pesa code
        sa.Column('remarks', sa.Text()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.CheckConstraint(
            "payment_status IN ('Paid', 'Pending', 'Overdue')",
            name='ck_payments_payment_status',
        ),
        sa.CheckConstraint(
            "payment_method IN ('Cash', 'Bank Transfer', 'Credit Card', 'Mobile Money', 'Check', 'Other')",
            name='ck_payments_payment_method',
        ),
        sa.CheckConstraint(
            "payment_category IN ('Rent', 'Utilities', 'Deposit', 'Other')",
            name='ck_payments_payment_category',
        ),
    )


def downgrade() -> None:
    """Drop the payments table."""
    op.drop_table('payments')
