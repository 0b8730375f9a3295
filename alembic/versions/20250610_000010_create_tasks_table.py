"""Create tasks table

Revision ID: 20250610_000010
Revises: 20250610_000009
Create Date: 2025-06-10
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000010'
down_revision: Union[str, None] = '20250610_000009'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the tasks table."""
    op.create_table(
        'tasks',
        sa.Column('task_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('task_name', sa.Text(), nullable=False, unique=True),
        sa.Column('due_date', sa.Text(), nullable=False),
        sa.Column('priority', sa.Text(), nullable=False),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the tasks table."""
    op.drop_table('tasks')
