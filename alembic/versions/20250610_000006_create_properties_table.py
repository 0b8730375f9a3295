"""Create properties table

Revision ID: 20250610_000006
Revises: 20250610_000005
Create Date: 2025-06-10
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000006'
down_revision: Union[str, None] = '20250610_000005'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the properties table."""
    op.create_table(
        'properties',
        sa.Column('property_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('total_units', sa.Integer(), nullable=False),
        sa.Column('property_type', sa.Text(), nullable=False),
        sa.Column('status', sa.Text(), nullable=False, server_default='active'),
        sa.Column('last_inspection', sa.Date()),
        sa.Column('manager_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['manager_id'], ['managers.manager_id']),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the properties table."""
    op.drop_table('properties')
