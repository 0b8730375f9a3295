"""Create complaints table

Revision ID: 20250610_000015
Revises: 20250610_000014
Create Date: 2025-06-10
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000015'
down_revision: Union[str, None] = '20250610_000014'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the complaints table."""
    op.create_table(
        'complaints',
        sa.Column('complaint_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('unit_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer()),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', sa.Text(), nullable=False),
        sa.Column('created_at', sa.Text(), server_default=sa.text("(datetime('now'))")),
        sa.Column('updated_at', sa.Text(), server_default=sa.text("(datetime('now'))")),
        sa.CheckConstraint(
            "status IN ('Open', 'In Progress', 'Resolved')",
            name='ck_complaints_status',
        ),
        sa.ForeignKeyConstraint(['unit_id'], ['units.unit_id']),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.tenant_id']),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the complaints table."""
    op.drop_table('complaints')
