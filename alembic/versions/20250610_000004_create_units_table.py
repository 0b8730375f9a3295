"""Create units table

Revision ID: 20250610_000004
Revises: 20250610_000003
Create Date: 2025-06-10

References properties, which only arrives in revision 6; SQLite checks
foreign keys on write, not at CREATE TABLE time.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000004'
down_revision: Union[str, None] = '20250610_000003'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the units table."""
    op.create_table(
        'units',
        sa.Column('unit_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('unit_number', sa.Text(), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('block_id', sa.Text()),
        sa.Column('floor_number', sa.Integer()),
        sa.Column('unit_status', sa.Text(), nullable=False),  # e.g. 'vacant', 'occupied'
        sa.Column('unit_type', sa.Text(), nullable=False),
        sa.Column('bedroom_count', sa.Integer(), nullable=False),
        sa.Column('bathroom_count', sa.Integer(), nullable=False),
        sa.Column('monthly_rent', sa.DECIMAL(10, 2)),
        sa.Column('security_deposit', sa.DECIMAL(10, 2)),
        sa.Column('tenant_id', sa.Integer()),
        sa.Column('notes', sa.Text()),
        sa.ForeignKeyConstraint(['property_id'], ['properties.property_id']),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.tenant_id']),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the units table."""
    op.drop_table('units')
