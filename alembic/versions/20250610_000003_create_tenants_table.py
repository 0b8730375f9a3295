"""Create tenants table

Revision ID: 20250610_000003
Revises: 20250610_000002
Create Date: 2025-06-10
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000003'
down_revision: Union[str, None] = '20250610_000002'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the tenants table."""
    op.create_table(
        'tenants',
        sa.Column('tenant_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('full_name', sa.Text(), nullable=False),
        sa.Column('phone_number', sa.Text()),
        sa.Column('email', sa.Text()),
        sa.Column('id_number', sa.Text()),
        sa.Column('lease_start_date', sa.Date(), nullable=False),
        sa.Column('lease_end_date', sa.Date(), nullable=False),
        sa.Column('rent_amount', sa.DECIMAL(10, 2)),
        sa.Column('deposit_amount', sa.DECIMAL(10, 2)),
        sa.Column('unit_id', sa.Integer()),
        sa.Column('status', sa.Text(), server_default='active'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the tenants table."""
    op.drop_table('tenants')
