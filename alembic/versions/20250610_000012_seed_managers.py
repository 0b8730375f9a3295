"""Seed managers table

Revision ID: 20250610_000012
Revises: 20250610_000011
Create Date: 2025-06-10

Three starter managers so a fresh install can create properties.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20250610_000012'
down_revision: Union[str, None] = '20250610_000011'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


SEED_MANAGERS = [
    {'name': 'Alice Johnson', 'email': 'alice.j@example.com', 'phone': '111-222-3333', 'hire_date': '2023-01-15'},
    {'name': 'Bob Smith', 'email': 'bob.s@example.com', 'phone': '444-555-6666', 'hire_date': '2022-07-01'},
    {'name': 'Carol White', 'email': 'carol.w@example.com', 'phone': '777-888-9999', 'hire_date': '2024-03-20'},
]

managers = sa.table(
    'managers',
    sa.column('name', sa.Text()),
    sa.column('email', sa.Text()),
    sa.column('phone', sa.Text()),
    sa.column('hire_date', sa.Text()),
)


def upgrade() -> None:
    """Insert the starter managers."""
    op.bulk_insert(managers, SEED_MANAGERS)


def downgrade() -> None:
    """Remove the starter managers."""
    op.execute(
        managers.delete().where(
            managers.c.email.in_([manager['email'] for manager in SEED_MANAGERS])
        )
    )
