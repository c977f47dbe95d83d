"""Add upstream_cache table

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create upstream_cache table."""
    op.create_table('upstream_cache', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sqlmodel.sql.sqltypes.AutoString(length=128), nullable=False),
        sa.Column('kind', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('payload', sa.JSON(), nullable=False),
        sa.Column('cached_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('owner_id', 'kind', name='uq_upstream_cache_owner_kind'))
    op.create_index(op.f('ix_upstream_cache_owner_id'), 'upstream_cache', ['owner_id'], unique=False)


def downgrade() -> None:
    """Drop upstream_cache table."""
    op.drop_index(op.f('ix_upstream_cache_owner_id'), table_name='upstream_cache')
    op.drop_table('upstream_cache')
