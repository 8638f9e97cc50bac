"""create herds and herd_members tables

Revision ID: 3f1c2d9e8a41
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2d9e8a41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'herds',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=1024), nullable=True),
        sa.Column('archived', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_herds'),
        sa.UniqueConstraint('owner_id', 'name', name='ux_herds_owner_id_name'),
    )
    op.create_index('ix_herds_owner_id', 'herds', ['owner_id'], unique=False)

    op.create_table(
        'herd_members',
        sa.Column('herd_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(
            ['herd_id'], ['herds.id'], name='fk_herd_members_herd_id_herds', ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('herd_id', 'animal_id', name='pk_herd_members'),
    )


def downgrade() -> None:
    op.drop_table('herd_members')
    op.drop_index('ix_herds_owner_id', table_name='herds')
    op.drop_table('herds')
