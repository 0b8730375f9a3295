"""Add payment_month to payments

Revision ID: 20250610_000013
Revises: 20250610_000012
Create Date: 2025-06-10

payment_month is the YYYY-MM of the due date. Existing rows are
backfilled from due_date.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000013'
down_revision: Union[str, None] = '20250610_000012'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add and backfill payments.payment_month."""
    op.add_column(
        'payments',
        sa.Column('payment_month', sa.Text(), nullable=False, server_default=''),
    )
    op.execute(
        "UPDATE payments SET payment_month = strftime('%Y-%m', due_date) "
        "WHERE payment_month = ''"
    )


def downgrade() -> None:
    """Drop payments.payment_month."""
    op.execute("ALTER TABLE payments DROP COLUMN payment_month")
