"""Create managers table

Revision ID: 20250610_000011
Revises: 20250610_000010
Create Date: 2025-06-10
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000011'
down_revision: Union[str, None] = '20250610_000010'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the managers table."""
    op.create_table(
        'managers',
        sa.Column('manager_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text()),
        sa.Column('phone', sa.Text(), nullable=False),
        sa.Column('hire_date', sa.Text(), nullable=False),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the managers table."""
    op.drop_table('managers')
