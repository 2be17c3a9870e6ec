"""unique open work entry per task

Revision ID: 8b41e0d5c6a2
Revises: 3f2c9a1b7d40
Create Date: 2026-10-19 11:03:07.902514

"""
from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = '8b41e0d5c6a2'
down_revision: Union[str, Sequence[str], None] = '3f2c9a1b7d40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute(
        """
        CREATE UNIQUE INDEX IF NOT EXISTS uq_work_entries_open
        ON work_entries(task_id)
        WHERE finished_on IS NULL;
        """
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP INDEX IF EXISTS uq_work_entries_open;")
