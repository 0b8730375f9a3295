"""Create leases table

Revision ID: 20250610_000005
Revises: 20250610_000004
Create Date: 2025-06-10
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000005'
down_revision: Union[str, None] = '20250610_000004'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the leases table."""
    op.create_table(
        'leases',
        sa.Column('lease_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('rent_amount', sa.DECIMAL(10, 2)),
        sa.Column('lease_start_date', sa.Date(), nullable=False),
        sa.Column('lease_end_date', sa.Date(), nullable=False),
        sa.Column('deposit_paid', sa.DECIMAL(10, 2)),
        sa.Column('status', sa.Text(), server_default='active'),  # active/expired/terminated
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.tenant_id']),
        sa.ForeignKeyConstraint(['unit_id'], ['units.unit_id']),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the leases table."""
    op.drop_table('leases')
