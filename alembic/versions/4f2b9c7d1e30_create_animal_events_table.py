"""create animal_events table

Revision ID: 4f2b9c7d1e30
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f2b9c7d1e30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'animal_events',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('occurred_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('data', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_animal_events'),
    )
    op.create_index('ix_animal_events_tenant_id', 'animal_events', ['tenant_id'], unique=False)
    op.create_index(
        'ix_animal_events_tenant_animal_occurred',
        'animal_events',
        ['tenant_id', 'animal_id', 'occurred_at'],
        unique=False,
    )
    op.create_index(
        'ix_animal_events_tenant_type_occurred',
        'animal_events',
        ['tenant_id', 'type', 'occurred_at'],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index('ix_animal_events_tenant_type_occurred', table_name='animal_events')
    op.drop_index('ix_animal_events_tenant_animal_occurred', table_name='animal_events')
    op.drop_index('ix_animal_events_tenant_id', table_name='animal_events')
    op.drop_table('animal_events')
