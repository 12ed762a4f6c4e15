"""create_todos_table

Revision ID: 4c1f0e8a2b7d
Revises:
Create Date: 2026-10-19 09:12:44.105218

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1f0e8a2b7d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # The service also creates this table on startup, so tolerate it existing
    op.create_table(
        'todos',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('task', sa.String(length=255), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True, server_default=sa.func.current_timestamp()),
        sa.PrimaryKeyConstraint('id'),
        if_not_exists=True,
    )
    op.create_index('idx_todos_completed', 'todos', ['completed'], unique=False, if_not_exists=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_todos_completed', table_name='todos')
    op.drop_table('todos')
