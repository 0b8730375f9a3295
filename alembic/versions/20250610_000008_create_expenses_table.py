"""Create expenses table

Revision ID: 20250610_000008
Revises: 20250610_000007
Create Date: 2025-06-10

An expense can be scoped to a unit, a block or a whole property; all
three references are optional.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000008'
down_revision: Union[str, None] = '20250610_000007'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the expenses table."""
    op.create_table(
        'expenses',
        sa.Column('expense_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('amount', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('category', sa.Text(), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('expense_date', sa.Date(), nullable=False),
        sa.Column('unit_id', sa.Integer()),
        sa.Column('block_id', sa.Integer()),
        sa.Column('property_id', sa.Integer()),
        sa.Column('payment_method', sa.Text(), nullable=False),
        sa.Column('vendor', sa.Text(), nullable=False),
        sa.Column('invoice_number', sa.Text()),
        sa.Column('paid_by', sa.Text()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['unit_id'], ['units.unit_id']),
        sa.ForeignKeyConstraint(['block_id'], ['blocks.block_id']),
        sa.ForeignKeyConstraint(['property_id'], ['properties.property_id']),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the expenses table."""
    op.drop_table('expenses')
