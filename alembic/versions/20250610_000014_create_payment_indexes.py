"""Create indexes on payments table

Revision ID: 20250610_000014
Revises: 20250610_000013
Create Date: 2025-06-10
"""
from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = '20250610_000014'
down_revision: Union[str, None] = '20250610_000013'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Index the columns payments are filtered by."""
    op.create_index('idx_payment_month', 'payments', ['payment_month'])
    op.create_index('idx_tenant_id', 'payments', ['tenant_id'])
    op.create_index('idx_unit_id', 'payments', ['unit_id'])


def downgrade() -> None:
    """Drop the payments indexes."""
    op.drop_index('idx_unit_id', table_name='payments')
    op.drop_index('idx_tenant_id', table_name='payments')
    op.drop_index('idx_payment_month', table_name='payments')
