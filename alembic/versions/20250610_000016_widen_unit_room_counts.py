"""Store unit bedroom and bathroom counts as REAL

Revision ID: 20250610_000016
Revises: 20250610_000015
Create Date: 2025-06-10

Each column is renamed aside, recreated as a nullable REAL, filled from
the old column, and the old column dropped. Needs SQLite 3.35+ for
DROP COLUMN.
"""
from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = '20250610_000016'
down_revision: Union[str, None] = '20250610_000015'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ROOM_COUNT_COLUMNS = ('bedroom_count', 'bathroom_count')


def _retype_column(column: str, new_type: str) -> None:
    op.execute(f"ALTER TABLE units RENAME COLUMN {column} TO old_{column}")
    op.execute(f"ALTER TABLE units ADD COLUMN {column} {new_type}")
    op.execute(f"UPDATE units SET {column} = old_{column}")
    op.execute(f"ALTER TABLE units DROP COLUMN old_{column}")


def upgrade() -> None:
    """Recreate the room counts as REAL columns."""
    for column in ROOM_COUNT_COLUMNS:
        _retype_column(column, 'REAL')


def downgrade() -> None:
    """Recreate the room counts as INTEGER columns.

    Lossy: the columns come back nullable, so the NOT NULL that
    revision 000004 put on them is not restored. Fractional counts are
    kept as stored, since SQLite does not coerce REAL values on copy.
    """
    for column in ROOM_COUNT_COLUMNS:
        _retype_column(column, 'INTEGER')
