"""Create recent_activities table

Revision ID: 20250610_000009
Revises: 20250610_000008
Create Date: 2025-06-10
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000009'
down_revision: Union[str, None] = '20250610_000008'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the recent_activities table."""
    op.create_table(
        'recent_activities',
        sa.Column('recent_activity_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('activity_type', sa.Text(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('time', sa.Text(), nullable=False),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the recent_activities table."""
    op.drop_table('recent_activities')
