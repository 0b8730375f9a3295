"""Create blocks table

Revision ID: 20250610_000007
Revises: 20250610_000006
Create Date: 2025-06-10
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000007'
down_revision: Union[str, None] = '20250610_000006'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the blocks table."""
    op.create_table(
        'blocks',
        sa.Column('block_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('block_name', sa.Text(), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('floor_count', sa.Integer()),
        sa.Column('notes', sa.Text()),
        sa.ForeignKeyConstraint(['property_id'], ['properties.property_id']),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the blocks table."""
    op.drop_table('blocks')
